"""
Tests for size and timestamp formatting.

Modified: 2026-10-18
"""

from dateutil import tz

from dirpanel.core.formatting import format_size, format_timestamp


class TestFormatSize:
    """Test byte-size formatting."""

    def test_zero_uses_placeholder(self):
        assert format_size(0) == "-"
        assert format_size(0, placeholder="") == ""

    def test_bytes(self):
        assert format_size(1) == "1 byte"
        assert format_size(10) == "10 bytes"

    def test_decimal_units(self):
        assert format_size(1500) == "1.5 kB"
        assert format_size(2_000_000) == "2.0 MB"


class TestFormatTimestamp:
    """Test timestamp formatting."""

    def test_unknown_is_blank(self):
        assert format_timestamp(0) == ""

    def test_utc(self):
        assert format_timestamp(86_400_000, timezone=tz.tzutc()) == "1970-01-02 00:00"

    def test_custom_format(self):
        millis = 1_700_000_000_000  # 2023-11-14 22:13:20 UTC
        assert format_timestamp(millis, "%d/%m/%Y", timezone=tz.tzutc()) == "14/11/2023"

    def test_local_time_default(self):
        """Test that the default zone produces a non-empty string."""
        assert format_timestamp(1_700_000_000_000) != ""
