"""Student model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, ForeignKey, Index

from .base import Base, UTCDateTime, generate_id
from ..utils.timezone import isoformat, now_utc


class Student(Base):
    """
    A student enrolled at a college.

    Fields:
        id: Unique identifier (generated)
        college_id: College the student belongs to
        name: Full name
        email: Contact address, unique across all students
        created_at: When the student was created
        updated_at: Bumped on every partial update
    """
    __tablename__ = 'students'
    __table_args__ = (
        Index('ix_students_college_id', 'college_id'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    college_id = Column(
        String(36),
        ForeignKey('colleges.id', ondelete='RESTRICT'),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True)
    created_at = Column(UTCDateTime, nullable=False, default=now_utc)
    updated_at = Column(UTCDateTime, nullable=False, default=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'collegeId': self.college_id,
            'name': self.name,
            'email': self.email,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Student(id={self.id}, name={self.name}, email={self.email})"
