"""Unit tests for duration string parsing (token lifetime settings)."""

from datetime import timedelta

import pytest

from src.core.duration import parse_duration


@pytest.mark.unit
class TestParseDuration:
    """Test parse_duration."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("15m", timedelta(minutes=15)),
            ("7d", timedelta(days=7)),
            ("1h", timedelta(hours=1)),
            ("30s", timedelta(seconds=30)),
            ("3600", timedelta(seconds=3600)),
            (" 2H ", timedelta(hours=2)),
        ],
    )
    def test_parses_supported_units(self, value, expected):
        """Test every unit (and a bare number) converts to a timedelta."""
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "15x", "-5m", "1.5h", "m15"])
    def test_rejects_malformed_values(self, value):
        """Test unparsable strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid duration"):
            parse_duration(value)

    def test_rejects_zero(self):
        """Test a zero duration is not a usable token lifetime."""
        with pytest.raises(ValueError, match="must be positive"):
            parse_duration("0m")
