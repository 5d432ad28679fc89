"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from explora.domain.model.user_profile import UserProfile
from explora.domain.value import UserId


class UserProfileRepository(ABC):
    """Repository for user profiles."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by user ID.

        Args:
            user_id: The user's ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> UserProfile:
        """Save or update a profile.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        pass
