"""Session cookie configuration.

``SessionCookieSettings`` is the immutable value the cookie-issuing
component reads. ``SessionCookieConfig`` is the holder host code writes
to while the owning application context is still initializing.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from .constants import (
    DEFAULT_COOKIE_NAME,
    DEFAULT_MAX_AGE,
    UNVERSIONED_COOKIE_VERSION,
    VERSIONED_COOKIE_VERSION,
)
from .lifecycle import LifecycleGate
from .samesite import SameSite

_SETTABLE = frozenset(
    {
        "name",
        "domain",
        "path",
        "comment",
        "http_only",
        "secure",
        "max_age",
        "same_site",
    }
)


@dataclass(frozen=True)
class SessionCookieSettings:
    """Snapshot of session cookie attributes.

    ``None`` means unset: the runtime substitutes its own default for
    ``name`` and ``path`` and omits the other attributes.

    Attributes:
        name: Cookie name.
        domain: Domain attribute.
        path: Path attribute.
        comment: Comment attribute.
        http_only: Whether the cookie carries ``HttpOnly``.
        secure: Whether the cookie carries ``Secure``.
        max_age: Lifetime in seconds. Negative means session-scoped,
            zero means expire immediately.
        same_site: Cross-site policy, or None to defer to the context.
        versioned: Legacy ``Version=1`` marker, raised by setting a comment.

    Example:
        >>> settings = SessionCookieSettings(secure=True, max_age=3600)
        >>> settings.resolved(context_path="/shop").path
        '/shop'
    """

    name: str | None = None
    domain: str | None = None
    path: str | None = None
    comment: str | None = None
    http_only: bool = False
    secure: bool = False
    max_age: int = DEFAULT_MAX_AGE
    same_site: SameSite | None = None
    versioned: bool = False

    @property
    def version(self) -> int:
        return VERSIONED_COOKIE_VERSION if self.versioned else UNVERSIONED_COOKIE_VERSION

    @property
    def session_scoped(self) -> bool:
        """True when no explicit expiry applies."""
        return self.max_age < 0

    def resolved(self, context_path: str) -> SessionCookieSettings:
        """Return a copy with runtime defaults filled in.

        Args:
            context_path: Base path of the owning application.

        Returns:
            Settings whose ``name`` and ``path`` are never None.
        """
        return dataclasses.replace(
            self,
            name=self.name if self.name is not None else DEFAULT_COOKIE_NAME,
            path=self.path if self.path is not None else context_path,
        )


class SessionCookieConfig:
    """Mutable-until-locked holder of session cookie attributes.

    Every write swaps in a new ``SessionCookieSettings`` snapshot, so
    readers on request threads always see a complete set of values.
    Once the gate is locked all setters raise ``ConfigurationLockedError``
    and the last accepted values stay readable.

    Usage:
        gate = LifecycleGate()
        config = SessionCookieConfig(gate)
        config.max_age = 3600
        config.secure = True

        gate.lock()
        config.max_age        # 3600
        config.path = "/app"  # raises ConfigurationLockedError
    """

    __slots__ = ("_gate", "_settings", "_logger")

    def __init__(
        self,
        gate: LifecycleGate,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the config with default attributes.

        Args:
            gate: Lifecycle gate owned by the application context.
            logger: Optional logger for debugging.
        """
        self._gate = gate
        self._settings = SessionCookieSettings()
        self._logger = logger

    def __repr__(self) -> str:
        return f"SessionCookieConfig({self._settings!r}, locked={self.locked})"

    def _write(self, **changes: Any) -> None:
        attribute = ", ".join(changes)
        with self._gate.guard(attribute):
            if changes.get("comment") is not None:
                changes["versioned"] = True
            self._settings = dataclasses.replace(self._settings, **changes)
        if self._logger:
            self._logger.debug("Session cookie attributes set: %r", changes)

    @property
    def locked(self) -> bool:
        return self._gate.locked

    @property
    def settings(self) -> SessionCookieSettings:
        """Current immutable snapshot of all attributes."""
        return self._settings

    @property
    def name(self) -> str | None:
        return self._settings.name

    @name.setter
    def name(self, value: str | None) -> None:
        self._write(name=value)

    @property
    def domain(self) -> str | None:
        return self._settings.domain

    @domain.setter
    def domain(self, value: str | None) -> None:
        self._write(domain=value)

    @property
    def path(self) -> str | None:
        return self._settings.path

    @path.setter
    def path(self, value: str | None) -> None:
        self._write(path=value)

    @property
    def comment(self) -> str | None:
        return self._settings.comment

    @comment.setter
    def comment(self, value: str | None) -> None:
        # A non-null comment marks the cookie Version=1; clearing it does not undo that
        self._write(comment=value)

    @property
    def http_only(self) -> bool:
        return self._settings.http_only

    @http_only.setter
    def http_only(self, value: bool) -> None:
        self._write(http_only=value)

    @property
    def secure(self) -> bool:
        return self._settings.secure

    @secure.setter
    def secure(self, value: bool) -> None:
        self._write(secure=value)

    @property
    def max_age(self) -> int:
        return self._settings.max_age

    @max_age.setter
    def max_age(self, value: int) -> None:
        self._write(max_age=value)

    @property
    def same_site(self) -> SameSite | None:
        return self._settings.same_site

    @same_site.setter
    def same_site(self, value: SameSite | None) -> None:
        self._write(same_site=value)

    @property
    def versioned(self) -> bool:
        return self._settings.versioned

    @property
    def version(self) -> int:
        return self._settings.version

    def configure(self, **attributes: Any) -> None:
        """Set several attributes in one write.

        Args:
            **attributes: Attribute names and values, e.g.
                ``configure(secure=True, max_age=3600)``.

        Raises:
            TypeError: If an attribute name is unknown. Nothing is written.
            ConfigurationLockedError: If the configuration is locked.
        """
        unknown = sorted(set(attributes) - _SETTABLE)
        if unknown:
            raise TypeError(f"Unknown session cookie attribute(s): {', '.join(unknown)}")
        if attributes:
            self._write(**attributes)
