"""Errors raised by domain services.

The API maps them to status codes in ``explora.interface.error``:
NotFoundError becomes 404, everything else under DomainError becomes 400.
"""


class DomainError(Exception):
    """Base for every error a client can cause."""


class ValidationError(DomainError):
    """Input is malformed (reversed trip dates, too many preferred tags)."""


class BusinessRuleViolationError(DomainError):
    """Input is well formed but not allowed right now, e.g. a full trip day."""


class LocationValidationError(ValidationError):
    """A location's tags break the tagging rules.

    ``errors`` holds every problem the validator found, in the order it
    reported them.
    """

    def __init__(self, location_name: str, errors: list[str]):
        self.location_name = location_name
        self.errors = list(errors)
        super().__init__(f"Location validation failed: {', '.join(self.errors)}")


class NotFoundError(DomainError):
    """A location, profile or trip with the given key does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
