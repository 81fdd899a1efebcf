"""
Core Utilities.

Formatting helpers shared by the decoder and the display layer.
None of them raise: bad input turns into a sentinel string or zero.
"""

from datetime import datetime, timedelta, timezone

from hs_order.core.constants import INVALID_TIME, SHANGHAI_UTC_OFFSET_HOURS, UNKNOWN_TIME

# China has not observed DST since 1991, so a fixed offset is exact.
SHANGHAI_TZ = timezone(timedelta(hours=SHANGHAI_UTC_OFFSET_HOURS), "Asia/Shanghai")


def format_timestamp(timestamp: int) -> str:
    """
    Render a Unix epoch second count as local ``YYYY-MM-DD HH:MM:SS``.

    Returns:
        ``未知时间`` for 0, ``时间格式错误`` when the value cannot be converted
    """
    if timestamp == 0:
        return UNKNOWN_TIME

    try:
        return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return INVALID_TIME


def format_signed(num: int) -> str:
    """Format a number with an explicit sign; zero stays unsigned."""
    if num == 0:
        return "0"
    return f"{num:+d}"


def parse_unsigned_int(s: str) -> int:
    """Parse an integer string, mapping unparsable and negative values to 0."""
    try:
        value = int(s)
    except (TypeError, ValueError):
        return 0
    return max(value, 0)


def shanghai_today(now: datetime | None = None) -> str:
    """Return today's date in Asia/Shanghai as ``YYYYMMDD``."""
    current = now if now is not None else datetime.now(timezone.utc)
    return current.astimezone(SHANGHAI_TZ).strftime("%Y%m%d")
