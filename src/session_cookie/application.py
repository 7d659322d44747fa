"""Application context owning a session cookie configuration.

The context creates the lifecycle gate and the config together, hands
the gate to the config, and is the only party that closes it.
"""

from __future__ import annotations

import logging

from .config import SessionCookieConfig, SessionCookieSettings
from .constants import DEFAULT_CONTEXT_PATH
from .exceptions import ContextDestroyedError
from .lifecycle import LifecycleGate


class ApplicationContext:
    """Owner of one session cookie configuration.

    Usage:
        context = ApplicationContext(context_path="/shop")
        context.session_cookie_config.secure = True

        context.start()  # initialization complete, config is now read-only
        context.cookie_settings.path  # '/shop'
    """

    def __init__(
        self,
        context_path: str = DEFAULT_CONTEXT_PATH,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the context and its cookie configuration.

        Args:
            context_path: Base path of the application, used as the
                cookie path when none is configured.
            logger: Optional logger for debugging.
        """
        self._context_path = context_path or DEFAULT_CONTEXT_PATH
        self._logger = logger
        self._gate = LifecycleGate(logger=logger)
        self._config: SessionCookieConfig | None = SessionCookieConfig(
            self._gate, logger=logger
        )

    @property
    def context_path(self) -> str:
        return self._context_path

    @property
    def running(self) -> bool:
        return self._gate.locked and self._config is not None

    @property
    def destroyed(self) -> bool:
        return self._config is None

    @property
    def session_cookie_config(self) -> SessionCookieConfig:
        """The context's cookie configuration.

        Raises:
            ContextDestroyedError: If the context has been destroyed.
        """
        if self._config is None:
            raise ContextDestroyedError(self._context_path)
        return self._config

    @property
    def cookie_settings(self) -> SessionCookieSettings:
        """Configured settings with ``name`` and ``path`` defaults filled in.

        Raises:
            ContextDestroyedError: If the context has been destroyed.
        """
        return self.session_cookie_config.settings.resolved(self._context_path)

    def start(self) -> None:
        """Signal that initialization is complete and lock the config.

        Calling it again is a no-op.

        Raises:
            ContextDestroyedError: If the context has been destroyed.
        """
        config = self.session_cookie_config
        if self._gate.lock() and self._logger:
            self._logger.info(
                "Application context started: path=%s, cookie=%r",
                self._context_path,
                config.settings,
            )

    def destroy(self) -> None:
        """Discard the cookie configuration. Calling it again is a no-op."""
        if self._config is None:
            return
        self._gate.lock()
        self._config = None
        if self._logger:
            self._logger.info("Application context destroyed: path=%s", self._context_path)
