"""Registration, attendance and feedback models.

A registration links one student to one event. Attendance and feedback hang
off a registration, at most one of each, and go away with it.
"""

from typing import Dict, Any
from sqlalchemy import (
    Boolean, CheckConstraint, Column, ForeignKey, Index, Integer,
    String, Text, UniqueConstraint,
)

from .base import Base, UTCDateTime, generate_id
from ..utils.timezone import isoformat, now_utc


class Registration(Base):
    """
    A student's registration for an event.

    Fields:
        id: Unique identifier (generated)
        event_id: Event registered for
        student_id: Registering student
        registered_at: When the registration was made
    """
    __tablename__ = 'registrations'
    __table_args__ = (
        UniqueConstraint('event_id', 'student_id', name='uq_registrations_event_student'),
        Index('ix_registrations_student_id', 'student_id'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    event_id = Column(
        String(36),
        ForeignKey('events.id', ondelete='RESTRICT'),
        nullable=False,
    )
    student_id = Column(
        String(36),
        ForeignKey('students.id', ondelete='RESTRICT'),
        nullable=False,
    )
    registered_at = Column(UTCDateTime, nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'eventId': self.event_id,
            'studentId': self.student_id,
            'registeredAt': isoformat(self.registered_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Registration(id={self.id}, event_id={self.event_id}, student_id={self.student_id})"


class Attendance(Base):
    """
    Whether a registered student actually attended.

    Fields:
        id: Unique identifier (generated)
        registration_id: Registration this record belongs to (one per registration)
        attended: True if the student showed up
        marked_at: Refreshed whenever ``attended`` is set
    """
    __tablename__ = 'attendance'

    id = Column(String(36), primary_key=True, default=generate_id)
    registration_id = Column(
        String(36),
        ForeignKey('registrations.id', ondelete='CASCADE'),
        nullable=False,
        unique=True,
    )
    attended = Column(Boolean, nullable=False, default=False)
    marked_at = Column(UTCDateTime, nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'registrationId': self.registration_id,
            'attended': self.attended,
            'markedAt': isoformat(self.marked_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Attendance(id={self.id}, registration_id={self.registration_id}, attended={self.attended})"


class Feedback(Base):
    """
    Post-event rating left by a registered student.

    Fields:
        id: Unique identifier (generated)
        registration_id: Registration this feedback belongs to (one per registration)
        rating: Integer from 1 to 5
        comment: Free text (optional)
        submitted_at: When the feedback was submitted
    """
    __tablename__ = 'feedback'
    __table_args__ = (
        CheckConstraint('rating BETWEEN 1 AND 5', name='ck_feedback_rating_range'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    registration_id = Column(
        String(36),
        ForeignKey('registrations.id', ondelete='CASCADE'),
        nullable=False,
        unique=True,
    )
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    submitted_at = Column(UTCDateTime, nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'registrationId': self.registration_id,
            'rating': self.rating,
            'comment': self.comment,
            'submittedAt': isoformat(self.submitted_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Feedback(id={self.id}, registration_id={self.registration_id}, rating={self.rating})"
