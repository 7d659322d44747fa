"""Tests for LifecycleGate."""

from __future__ import annotations

import threading

import pytest

from session_cookie import ConfigurationLockedError, LifecycleGate, LifecycleState


class TestLifecycleGate:
    """Tests for the Configurable -> Locked transition."""

    def test_starts_configurable(self, gate: LifecycleGate) -> None:
        """Test that a new gate is open."""
        assert gate.state is LifecycleState.CONFIGURABLE
        assert gate.locked is False

    def test_lock_transitions_once(self, gate: LifecycleGate) -> None:
        """Test that only the first lock call performs the transition."""
        assert gate.lock() is True
        assert gate.lock() is False
        assert gate.state is LifecycleState.LOCKED

    def test_guard_allows_writes_while_open(self, gate: LifecycleGate) -> None:
        """Test that guard yields while configurable."""
        entered = False
        with gate.guard("name"):
            entered = True

        assert entered is True

    def test_guard_raises_when_locked(self, gate: LifecycleGate) -> None:
        """Test that guard refuses entry after lock."""
        gate.lock()

        with pytest.raises(ConfigurationLockedError) as exc_info:
            with gate.guard("path"):
                pytest.fail("guard body must not run once locked")

        assert exc_info.value.attribute == "path"

    def test_lock_waits_for_in_flight_write(self, gate: LifecycleGate) -> None:
        """Test that lock cannot complete while a guarded write is in progress."""
        writing = threading.Event()
        release = threading.Event()
        locked = threading.Event()

        def write() -> None:
            with gate.guard("max_age"):
                writing.set()
                release.wait(timeout=5)

        def close() -> None:
            gate.lock()
            locked.set()

        writer = threading.Thread(target=write)
        writer.start()
        assert writing.wait(timeout=5)

        closer = threading.Thread(target=close)
        closer.start()
        assert not locked.wait(timeout=0.1)

        release.set()
        writer.join(timeout=5)
        closer.join(timeout=5)
        assert locked.is_set()
        assert gate.locked is True
