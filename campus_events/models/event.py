"""Event model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, Integer, ForeignKey, CheckConstraint, Index

from .base import Base, UTCDateTime, generate_id
from ..utils.timezone import isoformat, now_utc


class Event(Base):
    """
    An event hosted by a college.

    Fields:
        id: Unique identifier (generated)
        college_id: Owning college; deleting a college with events is refused
        name: Event title
        type: Free-form category (e.g. 'Workshop', 'Seminar')
        description: Longer description (optional)
        date: When the event takes place
        max_capacity: Total number of seats, never negative
        created_by: Person or body that created the event
        created_at: When this event was first stored
        updated_at: Bumped on every partial update
    """
    __tablename__ = 'events'
    __table_args__ = (
        CheckConstraint('max_capacity >= 0', name='ck_events_max_capacity'),
        Index('ix_events_college_id', 'college_id'),
        Index('ix_events_date', 'date'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    college_id = Column(
        String(36),
        ForeignKey('colleges.id', ondelete='RESTRICT'),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    description = Column(Text)
    date = Column(UTCDateTime, nullable=False)
    max_capacity = Column(Integer, nullable=False, default=0)
    created_by = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=now_utc)
    updated_at = Column(UTCDateTime, nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'collegeId': self.college_id,
            'name': self.name,
            'type': self.type,
            'description': self.description,
            'date': isoformat(self.date),
            'maxCapacity': self.max_capacity,
            'createdBy': self.created_by,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, name={self.name}, date={self.date})"
