"""Domain value objects for Explora.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from explora.domain.value.common import ValueObject


class Mood(str, Enum):
    """Moods offered by the mood matcher."""

    ROMANTIC = "Romantic"
    ADVENTUROUS = "Adventurous"
    PEACEFUL = "Peaceful"
    CURIOUS = "Curious"
    ENERGETIC = "Energetic"
    CONTEMPLATIVE = "Contemplative"


class Coordinates(ValueObject):
    """Geographic coordinates of a location."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
