"""Report rows produced by the aggregation layer.

These are plain frozen dataclasses; ``to_dict`` gives the camelCase shape the
API returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class EventRegistrationStat:
    event_id: str
    event_name: str
    total_registrations: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventId": self.event_id,
            "eventName": self.event_name,
            "totalRegistrations": self.total_registrations,
        }


@dataclass(frozen=True)
class EventAttendanceStat:
    """``attendance_percentage`` is an integer in 0..100."""

    event_id: str
    event_name: str
    attendance_percentage: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventId": self.event_id,
            "eventName": self.event_name,
            "attendancePercentage": self.attendance_percentage,
        }


@dataclass(frozen=True)
class EventFeedbackStat:
    event_id: str
    event_name: str
    average_rating: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventId": self.event_id,
            "eventName": self.event_name,
            "averageRating": self.average_rating,
        }


@dataclass(frozen=True)
class EventPopularity:
    event_id: str
    event_name: str
    registrations: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventId": self.event_id,
            "eventName": self.event_name,
            "registrations": self.registrations,
        }


@dataclass(frozen=True)
class StudentParticipation:
    student_id: str
    student_name: str
    events_attended: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "eventsAttended": self.events_attended,
        }


@dataclass(frozen=True)
class DashboardSummary:
    """
    System-wide totals.

    ``average_attendance_rate`` is computed over every registration at once,
    not averaged from per-event percentages. Both averages are 0 when there is
    nothing to average.
    """

    total_events: int
    total_students: int
    total_registrations: int
    average_attendance_rate: int
    average_rating: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalEvents": self.total_events,
            "totalStudents": self.total_students,
            "totalRegistrations": self.total_registrations,
            "averageAttendanceRate": self.average_attendance_rate,
            "averageRating": self.average_rating,
        }
