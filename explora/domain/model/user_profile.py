"""User profile entity."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from explora.domain.model.common import DomainModel
from explora.domain.value import UserId


class TravelStyle(DomainModel):
    """Travel preferences captured during onboarding."""

    preferred_tags: list[str] = Field(default_factory=list)  # Primary-layer tags
    mobility_preference: Literal["walk", "transit", "car", "mixed"] = "mixed"
    time_style: Literal["quick", "deep", "mixed"] = "mixed"
    group_type: Literal["solo", "couple", "family", "friends", "mixed"] = "mixed"


class AccessibilityPreferences(DomainModel):
    """Accessibility needs used to filter the catalog."""

    wheelchair_needed: bool = False
    avoid_stairs: bool = False
    elder_friendly: bool = False


class UserProfile(DomainModel):
    """User profile.

    Only the parts the discovery engine reads are modelled here: travel
    style for personalization and accessibility for filtering.
    """

    uid: UserId
    display_name: str = "User"
    travel_style: TravelStyle = Field(default_factory=TravelStyle)
    accessibility: AccessibilityPreferences = Field(
        default_factory=AccessibilityPreferences
    )
    onboarding_completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
