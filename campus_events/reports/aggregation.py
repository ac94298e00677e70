"""Aggregation engine for event and student reports.

Grouping and counting happen in the store (outer joins, ``GROUP BY``,
conditional ``SUM``); the numeric reductions are the small pure functions at
the top of this module so the zero/empty-group policy lives in one place:

* a zero denominator yields 0, never an error;
* per-event attendance and feedback reports drop events with nothing to
  average, the dashboard reports 0 instead;
* percentages round half up (12.5 -> 13), they are not banker's-rounded.

Rankings are sorted in Python on top of a fixed store iteration order
(``created_at`` then ``id``). The sort is stable, so ties keep that order and
the popularity and top-student reports are exact prefixes of their full
rankings.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, TypeVar

from sqlalchemy import case, func

from ..db.db_core import Database
from ..models import Attendance, Event, Feedback, Registration, Student
from ..models.reports import (
    DashboardSummary,
    EventAttendanceStat,
    EventFeedbackStat,
    EventPopularity,
    EventRegistrationStat,
    StudentParticipation,
)

logger = logging.getLogger(__name__)

POPULARITY_LIMIT = 10
TOP_STUDENTS_LIMIT = 3

RowT = TypeVar("RowT")


def attendance_percentage(attended: int, total: int) -> int:
    """
    ``round(100 * attended / total)`` with halves rounded up, 0 when ``total`` is 0.

    Integer arithmetic keeps the result exact for every count.
    """
    if total <= 0:
        return 0
    return (200 * attended + total) // (2 * total)


def average(total: float, count: int) -> float:
    """Arithmetic mean from a sum and a count, 0 when ``count`` is 0."""
    if count <= 0:
        return 0.0
    return total / count


def _attended_sum():
    # Registrations without an attendance row join as NULL and count as 0
    return func.coalesce(
        func.sum(case((Attendance.attended.is_(True), 1), else_=0)), 0
    )


def _ranked(rows: Sequence[RowT], key) -> List[RowT]:
    return sorted(rows, key=key, reverse=True)


class ReportService:
    """Computes every report from the current store state, on each call."""

    def __init__(self, database: Database):
        self.database = database

    def registration_stats(self) -> List[EventRegistrationStat]:
        """Registrations per event, including events nobody registered for."""
        registration_count = func.count(Registration.id)
        with self.database.session() as session:
            rows = (
                session.query(Event.id, Event.name, registration_count)
                .outerjoin(Registration, Registration.event_id == Event.id)
                .group_by(Event.id, Event.name, Event.created_at)
                .order_by(Event.created_at, Event.id)
                .all()
            )
        stats = [
            EventRegistrationStat(
                event_id=event_id,
                event_name=event_name,
                total_registrations=int(count or 0),
            )
            for event_id, event_name, count in rows
        ]
        return _ranked(stats, key=lambda stat: stat.total_registrations)

    def attendance_stats(self) -> List[EventAttendanceStat]:
        """Attendance percentage for each event with at least one registration."""
        registration_count = func.count(Registration.id)
        with self.database.session() as session:
            rows = (
                session.query(Event.id, Event.name, registration_count, _attended_sum())
                .join(Registration, Registration.event_id == Event.id)
                .outerjoin(Attendance, Attendance.registration_id == Registration.id)
                .group_by(Event.id, Event.name, Event.created_at)
                .having(registration_count > 0)
                .order_by(Event.created_at, Event.id)
                .all()
            )
        return [
            EventAttendanceStat(
                event_id=event_id,
                event_name=event_name,
                attendance_percentage=attendance_percentage(int(attended), int(total)),
            )
            for event_id, event_name, total, attended in rows
        ]

    def feedback_stats(self) -> List[EventFeedbackStat]:
        """Average rating for each event that received feedback."""
        feedback_count = func.count(Feedback.id)
        with self.database.session() as session:
            rows = (
                session.query(Event.id, Event.name, func.sum(Feedback.rating), feedback_count)
                .join(Registration, Registration.event_id == Event.id)
                .join(Feedback, Feedback.registration_id == Registration.id)
                .group_by(Event.id, Event.name, Event.created_at)
                .having(feedback_count > 0)
                .order_by(Event.created_at, Event.id)
                .all()
            )
        return [
            EventFeedbackStat(
                event_id=event_id,
                event_name=event_name,
                average_rating=average(float(rating_sum or 0), int(count)),
            )
            for event_id, event_name, rating_sum, count in rows
        ]

    def popularity_report(self, limit: int = POPULARITY_LIMIT) -> List[EventPopularity]:
        """The most registered-for events, a prefix of ``registration_stats``."""
        return [
            EventPopularity(
                event_id=stat.event_id,
                event_name=stat.event_name,
                registrations=stat.total_registrations,
            )
            for stat in self.registration_stats()[:limit]
        ]

    def participation_report(self) -> List[StudentParticipation]:
        """Events actually attended, per student, most active first."""
        with self.database.session() as session:
            rows = (
                session.query(Student.id, Student.name, _attended_sum())
                .outerjoin(Registration, Registration.student_id == Student.id)
                .outerjoin(Attendance, Attendance.registration_id == Registration.id)
                .group_by(Student.id, Student.name, Student.created_at)
                .order_by(Student.created_at, Student.id)
                .all()
            )
        participation = [
            StudentParticipation(
                student_id=student_id,
                student_name=student_name,
                events_attended=int(attended or 0),
            )
            for student_id, student_name, attended in rows
        ]
        return _ranked(participation, key=lambda row: row.events_attended)

    def top_active_students(self, limit: int = TOP_STUDENTS_LIMIT) -> List[StudentParticipation]:
        """The most active students, a prefix of ``participation_report``."""
        return self.participation_report()[:limit]

    def dashboard_summary(self) -> DashboardSummary:
        """System-wide totals and averages."""
        with self.database.session() as session:
            total_events = session.query(func.count(Event.id)).scalar() or 0
            total_students = session.query(func.count(Student.id)).scalar() or 0
            total_registrations, attended = (
                session.query(func.count(Registration.id), _attended_sum())
                .select_from(Registration)
                .outerjoin(Attendance, Attendance.registration_id == Registration.id)
                .one()
            )
            rating_sum, feedback_count = session.query(
                func.sum(Feedback.rating), func.count(Feedback.id)
            ).one()

        summary = DashboardSummary(
            total_events=int(total_events),
            total_students=int(total_students),
            total_registrations=int(total_registrations or 0),
            average_attendance_rate=attendance_percentage(
                int(attended or 0), int(total_registrations or 0)
            ),
            average_rating=average(float(rating_sum or 0), int(feedback_count or 0)),
        )
        logger.debug(f"Dashboard summary computed: {summary}")
        return summary
