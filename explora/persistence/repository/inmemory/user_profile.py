"""In-memory user profile repository."""

from typing import Optional

from explora.domain.model.user_profile import UserProfile
from explora.domain.repository.user_profile import UserProfileRepository
from explora.domain.value import UserId


class InMemoryUserProfileRepository(UserProfileRepository):
    """In-memory implementation of UserProfileRepository."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, UserProfile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def save(self, profile: UserProfile) -> UserProfile:
        """Save a profile."""
        self._profiles[profile.uid] = profile
        return profile
