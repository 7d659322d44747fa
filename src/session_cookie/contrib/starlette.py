"""Starlette/FastAPI integration for session cookie configuration.

Ties an ``ApplicationContext`` to the ASGI application lifecycle:
the lifespan locks the cookie config on startup and discards it on
shutdown, and the middleware exposes the locked settings to each
request through ``request.state`` and contextvars.

Note: This integration does NOT build Set-Cookie headers - the component
that issues session cookies reads the settings and does that.

Install with: pip install session-cookie-config[starlette]
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ..application import ApplicationContext
from ..context import set_current_cookie_settings

Lifespan = Callable[[ASGIApp], AbstractAsyncContextManager[None]]


def session_cookie_lifespan(
    context: ApplicationContext,
    logger: logging.Logger | None = None,
) -> Lifespan:
    """Build a Starlette lifespan that drives the context lifecycle.

    Args:
        context: The application context to start and destroy.
        logger: Optional logger for debugging.

    Returns:
        A lifespan callable for ``Starlette(lifespan=...)``.

    Usage:
        context = ApplicationContext()
        context.session_cookie_config.http_only = True

        app = Starlette(lifespan=session_cookie_lifespan(context))
    """

    @asynccontextmanager
    async def lifespan(app: ASGIApp) -> AsyncIterator[None]:
        context.start()
        if logger:
            logger.debug("Session cookie config locked on startup: %s", context.context_path)
        try:
            yield
        finally:
            context.destroy()

    return lifespan


class SessionCookieMiddleware(BaseHTTPMiddleware):
    """Middleware exposing session cookie settings to requests.

    Sets the resolved settings in:
    - request.state.session_cookie (for direct access in routes)
    - contextvars (for the cookie-issuing component)

    If the context was not started by a lifespan, the first request
    starts it, so settings are never served while still writable.

    Usage:
        from fastapi import FastAPI
        from session_cookie.contrib.starlette import SessionCookieMiddleware

        app = FastAPI()
        app.add_middleware(SessionCookieMiddleware, context=context)
    """

    def __init__(
        self,
        app: ASGIApp,
        context: ApplicationContext,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
            context: Application context owning the cookie config.
            logger: Optional logger for debugging.
        """
        super().__init__(app)
        self._context = context
        self._logger = logger

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Process the request with cookie settings in context."""
        if not self._context.running:
            self._context.start()
            if self._logger:
                self._logger.debug(
                    "Session cookie config locked on first request: %s",
                    self._context.context_path,
                )

        settings = self._context.cookie_settings
        request.state.session_cookie = settings
        set_current_cookie_settings(settings)

        try:
            return await call_next(request)
        finally:
            set_current_cookie_settings(None)
