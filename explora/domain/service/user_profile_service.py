"""User profile domain service."""

from datetime import datetime

import logfire

from explora.domain.error import ValidationError
from explora.domain.model.user_profile import (
    AccessibilityPreferences,
    TravelStyle,
    UserProfile,
)
from explora.domain.repository import UserProfileRepository
from explora.domain.value import UserId

from .base import Service

MIN_PREFERRED_TAGS = 3
MAX_PREFERRED_TAGS = 10


def validate_travel_style(travel_style: TravelStyle) -> list[str]:
    """Check the preferred tag count chosen during onboarding."""
    errors: list[str] = []
    count = len(travel_style.preferred_tags)
    if count > MAX_PREFERRED_TAGS:
        errors.append(f"Maximum {MAX_PREFERRED_TAGS} preferred tags allowed")
    if count < MIN_PREFERRED_TAGS:
        errors.append(f"Minimum {MIN_PREFERRED_TAGS} preferred tags required")
    return errors


class UserProfileService(Service):
    """Domain service for user profiles."""

    def __init__(self, user_profile_repository: UserProfileRepository) -> None:
        self.user_profile_repository = user_profile_repository

    async def get(self, user_id: UserId) -> UserProfile | None:
        return await self.user_profile_repository.find_by_id(user_id)

    async def get_or_default(self, user_id: UserId) -> UserProfile:
        """Stored profile, or a fresh one with default preferences."""
        profile = await self.get(user_id)
        return profile or UserProfile(uid=user_id)

    async def update_travel_style(
        self, user_id: UserId, travel_style: TravelStyle
    ) -> UserProfile:
        """Replace a user's travel style.

        Creates the profile on first update.

        Raises:
            ValidationError: If the preferred tag count is out of bounds
        """
        errors = validate_travel_style(travel_style)
        if errors:
            raise ValidationError(f"Profile validation failed: {', '.join(errors)}")

        profile = await self.get_or_default(user_id)
        updated = profile.model_copy(
            update={
                "travel_style": travel_style,
                "onboarding_completed": True,
                "updated_at": datetime.now(),
            }
        )
        saved = await self.user_profile_repository.save(updated)
        logfire.info(
            "Travel style updated",
            user_id=user_id,
            preferred_tags=len(travel_style.preferred_tags),
        )
        return saved

    async def update_accessibility(
        self, user_id: UserId, accessibility: AccessibilityPreferences
    ) -> UserProfile:
        """Replace a user's accessibility needs."""
        profile = await self.get_or_default(user_id)
        updated = profile.model_copy(
            update={"accessibility": accessibility, "updated_at": datetime.now()}
        )
        return await self.user_profile_repository.save(updated)
