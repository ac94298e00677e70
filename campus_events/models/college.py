"""College model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, CheckConstraint

from .base import Base, UTCDateTime, generate_id
from ..utils.timezone import isoformat, now_utc


class College(Base):
    """
    A college that owns events and enrolls students.

    Fields:
        id: Unique identifier (generated)
        name: Display name, never empty
        created_at: When the college was created
        updated_at: Bumped on every partial update
    """
    __tablename__ = 'colleges'
    __table_args__ = (
        CheckConstraint("name <> ''", name='ck_colleges_name_not_empty'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=now_utc)
    updated_at = Column(UTCDateTime, nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"College(id={self.id}, name={self.name})"
