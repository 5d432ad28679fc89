"""Domain model entities for Explora."""

from explora.domain.model.location import Location, LocationTags
from explora.domain.model.taxonomy import MoodProfile, TagCategory, TagTaxonomy
from explora.domain.model.trip import Trip, TripDay, TripDayChange
from explora.domain.model.user_profile import (
    AccessibilityPreferences,
    TravelStyle,
    UserProfile,
)

__all__ = [
    "AccessibilityPreferences",
    "Location",
    "LocationTags",
    "MoodProfile",
    "TagCategory",
    "TagTaxonomy",
    "TravelStyle",
    "Trip",
    "TripDay",
    "TripDayChange",
    "UserProfile",
]
