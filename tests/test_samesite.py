"""Tests for the SameSite enum."""

from __future__ import annotations

import pytest

from session_cookie import SameSite


class TestSameSite:
    """Tests for SameSite parsing and rendering."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Strict", SameSite.STRICT),
            ("lax", SameSite.LAX),
            ("NONE", SameSite.NONE),
            ("  Lax  ", SameSite.LAX),
        ],
    )
    def test_parse(self, raw: str, expected: SameSite) -> None:
        """Test that policy names parse case-insensitively."""
        assert SameSite.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        """Test that unknown policies raise ValueError."""
        with pytest.raises(ValueError, match="Unknown SameSite policy"):
            SameSite.parse("sometimes")

    def test_str_is_attribute_value(self) -> None:
        """Test that str() gives the attribute spelling."""
        assert str(SameSite.NONE) == "None"
        assert str(SameSite.STRICT) == "Strict"
