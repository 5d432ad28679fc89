"""Location entity and its layered tags."""

from datetime import datetime

from pydantic import Field

from explora.domain.model.common import DomainModel
from explora.domain.value import Coordinates, LocationId


class LocationTags(DomainModel):
    """Tags attached to a location, split into four layers.

    - primary: 3-5 user-facing themes, drawn from any primary category
    - secondary: 2-5 user-facing filters (time, weather, audience...)
    - hidden: algorithmic insights, never shown without an explicit reveal
    - contextual: seasonal and timing hints

    Counts and membership are checked by the tag validator, not here, so a
    badly tagged location can still be loaded and reported on.
    """

    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)
    hidden: list[str] = Field(default_factory=list)
    contextual: list[str] = Field(default_factory=list)

    def all_tags(self) -> list[str]:
        """Return tags from every layer, primary first."""
        return [*self.primary, *self.secondary, *self.hidden, *self.contextual]

    def visible_count(self) -> int:
        """Number of tags shown on a location card."""
        return len(self.primary) + len(self.secondary)

    def total_count(self) -> int:
        """Number of tags across all layers."""
        return (
            len(self.primary)
            + len(self.secondary)
            + len(self.hidden)
            + len(self.contextual)
        )


class Location(DomainModel):
    """A point of interest in the catalog."""

    id: LocationId
    name: str = Field(min_length=1, max_length=200)
    description: str = ""
    category: str = ""  # Legacy free-text category, still searchable
    tags: LocationTags = Field(default_factory=LocationTags)
    rating: float | None = Field(default=None, ge=0, le=5)
    address: str | None = None
    coordinates: Coordinates | None = None
    image: str | None = None
    verified: bool = False
    verified_by: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
