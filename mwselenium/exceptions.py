"""
Exception hierarchy for mwselenium.

Every error raised by the fixtures derives from FixtureError so that a test
harness can tell fixture failures apart from failures in the code under test.
"""

from typing import Any


class FixtureError(Exception):
    """
    Base exception for all mwselenium errors.

    Example:
        try:
            env.browser()
        except FixtureError as e:
            lg.error("fixture setup failed", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(FixtureError):
    """
    Configuration-related errors.

    Examples:
        - environments.yml not found or not a mapping
        - Unknown environment name
        - Unknown browser name
    """

    pass


class ConfigurationNotFound(ConfigError, KeyError):
    """Raised when a configuration key is missing and no default was given."""

    def __init__(self, key: str, environment: str | None = None) -> None:
        super().__init__(
            f"configuration for '{key}' not found", key=key, environment=environment
        )
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return FixtureError.__str__(self)


class BindingError(ConfigError, TypeError):
    """
    Invalid binding declaration.

    Raised when a class-level binding is declared without a callback, or when
    the option names of a binding are empty or not distinct.
    """

    pass


class ProvisioningError(FixtureError):
    """Raised when a user account cannot be provisioned."""

    pass


class ApiError(ProvisioningError):
    """
    MediaWiki API errors.

    The API error code (or the failing status of a multi-step action) is
    available in ``context["code"]``.
    """

    @property
    def code(self) -> str | None:
        return self.context.get("code")


class SessionError(FixtureError):
    """Raised when the resolved options cannot produce a browser session."""

    pass
