"""Base model for Explora domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable base for locations, profiles, trips and analysis results.

    Changes go through ``model_copy(update=...)`` and are saved back to the
    repository. Catalog records imported from JSON may carry fields the
    domain doesn't know about; those are dropped on validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
