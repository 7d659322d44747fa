"""Custom exceptions for session cookie configuration.

Provides a hierarchy of exceptions for better error handling
around the configuration lifecycle.
"""

from __future__ import annotations


class SessionCookieError(Exception):
    """Base exception for session cookie configuration errors.

    All package-specific exceptions inherit from this class,
    allowing callers to catch all of them with a single except clause.
    """


class ConfigurationLockedError(SessionCookieError, RuntimeError):
    """Raised when a cookie attribute is changed after the context started.

    This signals a programming error in host configuration code: the
    owning application context has finished initializing, so its session
    cookie configuration is read-only for the rest of its lifetime.

    Attributes:
        attribute: Name of the attribute the caller tried to change.
    """

    def __init__(
        self,
        attribute: str,
        message: str | None = None,
    ) -> None:
        self.attribute = attribute
        if message is None:
            message = (
                f"Cannot set session cookie attribute {attribute!r}: "
                "the application context has already been initialized"
            )
        super().__init__(message)


class ContextDestroyedError(SessionCookieError):
    """Raised when a destroyed application context is asked for its config.

    Attributes:
        context_path: Base path of the destroyed context.
    """

    def __init__(
        self,
        context_path: str,
        message: str | None = None,
    ) -> None:
        self.context_path = context_path
        if message is None:
            message = f"Application context {context_path!r} has been destroyed"
        super().__init__(message)


class SessionCookieContextError(SessionCookieError):
    """Raised when no cookie settings are available in context.

    This occurs when settings are required outside a request handled
    by the session cookie middleware.
    """

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "No session cookie settings in context - middleware not set up"
        super().__init__(message)
