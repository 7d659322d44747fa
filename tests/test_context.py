"""Tests for context variable helpers."""

from __future__ import annotations

import pytest

from session_cookie import (
    SessionCookieContextError,
    SessionCookieSettings,
    get_current_cookie_settings,
    require_current_cookie_settings,
    set_current_cookie_settings,
)


class TestContextVars:
    """Tests for request-scoped cookie settings management."""

    def test_set_and_get_settings(self) -> None:
        """Test setting and getting settings via contextvars."""
        settings = SessionCookieSettings(name="SID")
        set_current_cookie_settings(settings)

        assert get_current_cookie_settings() is settings
        assert require_current_cookie_settings() is settings

    def test_get_settings_returns_none_when_not_set(self) -> None:
        """Test that get_current_cookie_settings returns None when not set."""
        set_current_cookie_settings(None)

        assert get_current_cookie_settings() is None

    def test_require_settings_raises_when_not_set(self) -> None:
        """Test that require_current_cookie_settings fails without settings."""
        with pytest.raises(SessionCookieContextError, match="middleware not set up"):
            require_current_cookie_settings()
