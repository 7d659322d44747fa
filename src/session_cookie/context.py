"""Context variable helpers for request-scoped cookie settings.

Uses Python's contextvars to store the settings that apply to the
current request, so the cookie-issuing code can read them without
explicit parameter passing.
"""

from __future__ import annotations

from contextvars import ContextVar

from .config import SessionCookieSettings
from .exceptions import SessionCookieContextError

# ContextVar for current request's resolved cookie settings (DI pattern)
_current_cookie_settings: ContextVar[SessionCookieSettings | None] = ContextVar(
    "session_cookie_settings", default=None
)


def set_current_cookie_settings(settings: SessionCookieSettings | None) -> None:
    """Set cookie settings for current request (called by middleware).

    Args:
        settings: The settings to expose, or None to clear.
    """
    _current_cookie_settings.set(settings)


def get_current_cookie_settings() -> SessionCookieSettings | None:
    """Get cookie settings for current request.

    Returns:
        The current settings, or None if not set.
    """
    return _current_cookie_settings.get()


def require_current_cookie_settings() -> SessionCookieSettings:
    """Get cookie settings for current request, failing if absent.

    Raises:
        SessionCookieContextError: If no settings are set.
    """
    settings = _current_cookie_settings.get()
    if settings is None:
        raise SessionCookieContextError()
    return settings
