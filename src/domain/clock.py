"""
Time helpers.

Timestamps are stored as naive UTC datetimes; API payloads carry
ISO-8601 strings with a trailing "Z".
"""

from datetime import UTC, datetime
from typing import Optional


def utcnow() -> datetime:
    """Current time as a naive UTC datetime"""
    return datetime.now(UTC).replace(tzinfo=None)


def as_utc_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC"""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc_naive(value).isoformat() + "Z"
