import math
from datetime import datetime, timezone
from typing import Optional, Union

SECONDS_PER_DAY = 60 * 60 * 24


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() uses banker's rounding (round(2.5) == 2); scores are
    expected to round 2.5 up to 3.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def days_between(start: datetime, end: Optional[datetime] = None) -> float:
    """
    Fractional days elapsed from ``start`` to ``end`` (default: now, UTC).

    Negative when ``start`` is in the future.
    """
    end = ensure_utc(end) if end is not None else utc_now()
    return (end - ensure_utc(start)).total_seconds() / SECONDS_PER_DAY


def format_code_volume(size_kb: Union[int, float]) -> str:
    """Human readable code volume: '5.9MB' above 1024 KB, otherwise '512KB'."""
    if size_kb > 1024:
        return f"{size_kb / 1024:.1f}MB"
    return f"{int(size_kb)}KB"
