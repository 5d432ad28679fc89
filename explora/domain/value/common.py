"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Small immutable value compared field by field (e.g. coordinates).

    Unlike domain models, unknown fields are rejected: a typo in a value
    such as ``{"lat": 48.2, "lon": 16.3}`` should fail loudly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
