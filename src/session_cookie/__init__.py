"""Session cookie configuration locked at application startup.

Host code declares how session-tracking cookies should look while the
owning application context initializes; once the context starts, the
settings become read-only for the component that issues cookies.

Basic usage:
    from session_cookie import ApplicationContext, SameSite

    context = ApplicationContext(context_path="/shop")
    config = context.session_cookie_config
    config.http_only = True
    config.same_site = SameSite.LAX
    config.max_age = 3600

    context.start()
    context.cookie_settings.name  # 'JSESSIONID'
    config.secure = True          # raises ConfigurationLockedError

With FastAPI/Starlette:
    from session_cookie.contrib.starlette import (
        SessionCookieMiddleware,
        session_cookie_lifespan,
    )

    app = FastAPI(lifespan=session_cookie_lifespan(context))
    app.add_middleware(SessionCookieMiddleware, context=context)
"""

from __future__ import annotations

from .application import ApplicationContext
from .config import SessionCookieConfig, SessionCookieSettings
from .constants import (
    DEFAULT_CONTEXT_PATH,
    DEFAULT_COOKIE_NAME,
    DEFAULT_MAX_AGE,
    UNVERSIONED_COOKIE_VERSION,
    VERSIONED_COOKIE_VERSION,
)
from .context import (
    get_current_cookie_settings,
    require_current_cookie_settings,
    set_current_cookie_settings,
)
from .exceptions import (
    ConfigurationLockedError,
    ContextDestroyedError,
    SessionCookieContextError,
    SessionCookieError,
)
from .lifecycle import LifecycleGate, LifecycleState
from .samesite import SameSite

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "ApplicationContext",
    "SessionCookieConfig",
    "SessionCookieSettings",
    "LifecycleGate",
    "LifecycleState",
    "SameSite",
    # Exceptions
    "SessionCookieError",
    "ConfigurationLockedError",
    "ContextDestroyedError",
    "SessionCookieContextError",
    # Context helpers
    "set_current_cookie_settings",
    "get_current_cookie_settings",
    "require_current_cookie_settings",
    # Constants
    "DEFAULT_COOKIE_NAME",
    "DEFAULT_MAX_AGE",
    "DEFAULT_CONTEXT_PATH",
    "VERSIONED_COOKIE_VERSION",
    "UNVERSIONED_COOKIE_VERSION",
]
