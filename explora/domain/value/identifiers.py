"""Strongly typed identifiers for Explora domain entities.

Location and user ids come from the document store and the auth provider
as opaque strings, so these wrap ``str`` rather than ``UUID``.
"""

from typing import NewType

LocationId = NewType("LocationId", str)
UserId = NewType("UserId", str)
TripId = NewType("TripId", str)
