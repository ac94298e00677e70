"""Declarative base shared by all models."""

from uuid import uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

from ..utils.timezone import ensure_utc

Base = declarative_base()


def generate_id() -> str:
    """Opaque primary key for new rows."""
    return str(uuid4())


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp column stored in UTC.

    SQLite keeps the wall-clock time and silently drops the offset, so values
    are converted to UTC on the way in and tagged as UTC on the way out.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return ensure_utc(value)

    def process_result_value(self, value, dialect):
        return ensure_utc(value)
