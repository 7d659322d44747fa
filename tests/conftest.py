"""Test fixtures for session-cookie-config package."""

from __future__ import annotations

from typing import Generator

import pytest

from session_cookie import (
    ApplicationContext,
    LifecycleGate,
    SessionCookieConfig,
    set_current_cookie_settings,
)


@pytest.fixture
def gate() -> LifecycleGate:
    """Create an open lifecycle gate."""
    return LifecycleGate()


@pytest.fixture
def config(gate: LifecycleGate) -> SessionCookieConfig:
    """Create a SessionCookieConfig bound to the open gate."""
    return SessionCookieConfig(gate)


@pytest.fixture
def app_context() -> ApplicationContext:
    """Create an initializing ApplicationContext mounted at /app."""
    return ApplicationContext(context_path="/app")


@pytest.fixture(autouse=True)
def clear_cookie_settings_context() -> Generator[None, None, None]:
    """Make sure no request-scoped settings leak between tests."""
    set_current_cookie_settings(None)
    yield
    set_current_cookie_settings(None)
