"""User profile use cases."""

from pydantic import BaseModel

from explora.domain.model.user_profile import (
    AccessibilityPreferences,
    TravelStyle,
    UserProfile,
)
from explora.domain.service import UserProfileService
from explora.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    user_id: str


class UpdateTravelStyleRequest(BaseModel):
    user_id: str
    travel_style: TravelStyle


class UpdateAccessibilityRequest(BaseModel):
    user_id: str
    accessibility: AccessibilityPreferences


class GetUserProfileUseCase:
    """Use case for reading a profile (defaults when none is stored)."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfile:
        return await self.user_profile_service.get_or_default(UserId(request.user_id))


class UpdateTravelStyleUseCase:
    """Use case for saving onboarding travel preferences."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: UpdateTravelStyleRequest) -> UserProfile:
        """Execute travel style update.

        Raises:
            ValidationError: If the preferred tag count is out of bounds
        """
        return await self.user_profile_service.update_travel_style(
            UserId(request.user_id), request.travel_style
        )


class UpdateAccessibilityUseCase:
    """Use case for saving accessibility needs."""

    def __init__(self, user_profile_service: UserProfileService) -> None:
        self.user_profile_service = user_profile_service

    async def execute(self, request: UpdateAccessibilityRequest) -> UserProfile:
        return await self.user_profile_service.update_accessibility(
            UserId(request.user_id), request.accessibility
        )
