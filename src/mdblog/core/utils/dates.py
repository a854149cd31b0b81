"""Front-matter date normalization"""

from datetime import date, datetime, timezone
from typing import Any


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def coerce_date(value: Any) -> datetime:
    """Return value as an aware UTC datetime; missing or unparseable values become EPOCH."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        try:
            return value.astimezone(timezone.utc)
        except (OverflowError, ValueError):
            return EPOCH
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        return EPOCH
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return EPOCH
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return coerce_date(datetime.fromisoformat(text))
        except ValueError:
            return EPOCH
    return EPOCH
