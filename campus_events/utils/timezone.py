"""Timezone helpers.

All timestamps are stored in UTC. The UTCDateTime column type converts on
write and tags values read back from SQLite, which drops the offset, as UTC.
"""

from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 text for a stored timestamp, or None."""
    value = ensure_utc(value)
    return value.isoformat() if value else None
