"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Two kinds live in this package: pure analyzers over the tag taxonomy
    (validation, scoring, matching), which hold no state, and catalog or
    user services that work through repositories and are async.
    """
