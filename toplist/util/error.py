"""Errors raised while assembling the application (settings, DI container).

These surface at startup, never while serving a request.
"""


class SetupError(Exception):
    """The application could not be assembled."""

    pass


class ConfigurationError(SetupError):
    """Settings are missing or unsafe for the current environment."""

    pass


class DependencyInjectionError(SetupError):
    """No provider implementation matches the requested component."""

    pass
