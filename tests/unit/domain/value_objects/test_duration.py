"""Unit tests for compact duration parsing."""

import pytest

from authcore.domain.value_objects.duration import parse_duration

DEFAULT = 86400


class TestParseDuration:
    """Test parse_duration."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("24h", 86400),
            ("15m", 900),
            ("30s", 30),
            ("7d", 604800),
            (" 2h ", 7200),
        ],
    )
    def test_valid_durations(self, raw, expected):
        assert parse_duration(raw, DEFAULT) == expected

    @pytest.mark.parametrize("raw", ["", "tomorrow", "h", "15", "15 m", "1.5h", "-5m", "10w"])
    def test_malformed_falls_back_to_default(self, raw):
        assert parse_duration(raw, DEFAULT) == DEFAULT

    def test_none_falls_back_to_default(self):
        assert parse_duration(None, DEFAULT) == DEFAULT

    def test_zero_falls_back_to_default(self):
        assert parse_duration("0h", DEFAULT) == DEFAULT

    def test_integer_is_seconds(self):
        assert parse_duration(120, DEFAULT) == 120
        assert parse_duration(0, DEFAULT) == DEFAULT
