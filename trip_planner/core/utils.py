"""
Utility functions for the application.
"""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

CENT = Decimal("0.01")
_DATETIME_ADAPTER = TypeAdapter(datetime)


def quantize_money(value: Any) -> Decimal:
    """Coerce ``value`` to a Decimal rounded to two fractional digits."""
    if isinstance(value, float):
        # str() keeps the shortest repr, so 49.99 stays 49.99
        value = str(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def coerce_date(value: Any) -> Any:
    """Drop the time part of datetimes and ISO datetime strings.

    Aware values are taken as their UTC calendar date. Anything else passes
    through unchanged for the date validator to accept or reject.
    """
    if isinstance(value, str) and len(value.strip()) > 10:
        try:
            value = _DATETIME_ADAPTER.validate_python(value.strip())
        except PydanticValidationError:
            return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def utcnow() -> datetime:
    """Naive UTC timestamp as stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current UTC time, bumped past ``previous`` if the clock has not moved."""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def serialize_date(obj: Any) -> str:
    """Serialize date objects to ISO format strings."""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")
