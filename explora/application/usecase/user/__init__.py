"""User use cases."""

from .update_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateAccessibilityRequest,
    UpdateAccessibilityUseCase,
    UpdateTravelStyleRequest,
    UpdateTravelStyleUseCase,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UpdateAccessibilityRequest",
    "UpdateAccessibilityUseCase",
    "UpdateTravelStyleRequest",
    "UpdateTravelStyleUseCase",
]
