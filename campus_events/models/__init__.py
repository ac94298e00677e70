"""Models package initialization."""

from .base import Base
from .college import College
from .event import Event
from .student import Student
from .registration import Registration, Attendance, Feedback

__all__ = [
    'Base',
    'College',
    'Event',
    'Student',
    'Registration',
    'Attendance',
    'Feedback',
]
