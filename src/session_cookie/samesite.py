"""SameSite policy values for session cookies."""

from __future__ import annotations

from enum import Enum


class SameSite(Enum):
    """Cross-site policy carried by the ``SameSite`` cookie attribute.

    ``SameSite.NONE`` is an explicit policy (cookie sent on cross-site
    requests). It is not the same thing as leaving the attribute unset,
    which the config models as plain ``None``.
    """

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"

    @classmethod
    def parse(cls, value: str) -> SameSite:
        """Convert a case-insensitive policy name into a ``SameSite`` member.

        Args:
            value: Policy name such as ``"lax"`` or ``"Strict"``.

        Returns:
            The matching member.

        Raises:
            ValueError: If the name is not a known policy.

        Example:
            >>> SameSite.parse("lax")
            <SameSite.LAX: 'Lax'>
        """
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown SameSite policy: {value!r}")

    def __str__(self) -> str:
        return self.value
