"""
Human-readable size and timestamp formatting.

Modified: 2026-10-18
"""

from datetime import datetime, tzinfo
from typing import Optional

from dateutil import tz
from rich.filesize import decimal

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M"


def format_size(size_bytes: int, placeholder: str = "-") -> str:
    """
    Format a byte count with decimal (kB, MB, ...) units.

    Zero or unknown sizes render as the placeholder.
    """
    if not size_bytes or size_bytes < 0:
        return placeholder
    return decimal(size_bytes)


def format_timestamp(
    millis: int,
    date_format: str = DEFAULT_DATE_FORMAT,
    timezone: Optional[tzinfo] = None,
) -> str:
    """
    Format epoch milliseconds in local time.

    Returns an empty string for unknown (zero) timestamps.
    """
    if not millis:
        return ""
    zone = timezone or tz.tzlocal()
    try:
        return datetime.fromtimestamp(millis / 1000, tz=zone).strftime(date_format)
    except (OverflowError, OSError, ValueError):
        return ""
