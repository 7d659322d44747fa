"""Lifecycle gate shared by an application context and its cookie config.

The context owns the gate and flips it once initialization completes;
the config only observes it. Writes and the transition are serialized
by one lock, so a write either lands before the gate closes or fails.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from .exceptions import ConfigurationLockedError


class LifecycleState(Enum):
    """Two states of the configuration lifecycle."""

    CONFIGURABLE = "configurable"
    LOCKED = "locked"


class LifecycleGate:
    """One-way Configurable -> Locked switch.

    Usage:
        gate = LifecycleGate()

        with gate.guard("name"):
            ...  # write while still configurable

        gate.lock()  # called by the owning context when it starts
    """

    __slots__ = ("_state", "_mutex", "_logger")

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize an open gate.

        Args:
            logger: Optional logger for debugging.
        """
        self._state = LifecycleState.CONFIGURABLE
        self._mutex = threading.Lock()
        self._logger = logger

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def locked(self) -> bool:
        return self._state is LifecycleState.LOCKED

    def lock(self) -> bool:
        """Close the gate.

        Returns:
            True if this call performed the transition, False if the
            gate was already locked.
        """
        with self._mutex:
            if self._state is LifecycleState.LOCKED:
                return False
            self._state = LifecycleState.LOCKED
        if self._logger:
            self._logger.debug("Session cookie configuration locked")
        return True

    @contextmanager
    def guard(self, attribute: str) -> Iterator[None]:
        """Hold the gate open for a single write.

        Args:
            attribute: Attribute being written, reported on failure.

        Raises:
            ConfigurationLockedError: If the gate is already locked.
        """
        with self._mutex:
            if self._state is LifecycleState.LOCKED:
                if self._logger:
                    self._logger.warning(
                        "Rejected write to locked session cookie attribute: %s",
                        attribute,
                    )
                raise ConfigurationLockedError(attribute)
            yield
