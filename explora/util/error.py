"""Errors raised while wiring the application together.

These never reach API clients as domain errors; they stop the process at
startup (bad catalog file, missing provider) instead.
"""


class UtilError(Exception):
    """Base for startup and wiring errors."""


class ConfigurationError(UtilError):
    """The configured catalog file is missing, unreadable or malformed."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""
