"""Read-only joins that attach related rows to a base entity collection.

Each method runs a single query and returns plain dicts, ready for the API.
An empty base collection yields an empty list.
"""

from typing import Any, Dict, List

from sqlalchemy import func

from .db_core import Database, DatabaseError
from ..models import Attendance, College, Event, Feedback, Registration, Student


def _required(related, kind: str, owner) -> Any:
    """A missing parent row means the foreign keys were bypassed."""
    if related is None:
        raise DatabaseError(f"{owner} references a missing {kind}")
    return related


def _registration_with_student(registration: Registration, student: Student) -> Dict[str, Any]:
    row = registration.to_dict()
    row['student'] = student.to_dict()
    return row


class RelationshipJoiner:
    """Composes entities with their related rows."""

    def __init__(self, database: Database):
        self.database = database

    def events_with_college_and_count(self) -> List[Dict[str, Any]]:
        """Every event with its college and registration count, newest date first."""
        registration_count = func.count(Registration.id)
        with self.database.session() as session:
            rows = (
                session.query(Event, College, registration_count)
                .outerjoin(College, Event.college_id == College.id)
                .outerjoin(Registration, Registration.event_id == Event.id)
                .group_by(Event.id, College.id)
                .order_by(Event.date.desc())
                .all()
            )
            result = []
            for event, college, count in rows:
                item = event.to_dict()
                item['college'] = _required(college, 'college', event).to_dict()
                item['registrationCount'] = int(count or 0)
                result.append(item)
            return result

    def students_with_college(self) -> List[Dict[str, Any]]:
        """Every student with their college, by name."""
        with self.database.session() as session:
            rows = (
                session.query(Student, College)
                .outerjoin(College, Student.college_id == College.id)
                .order_by(Student.name)
                .all()
            )
            result = []
            for student, college in rows:
                item = student.to_dict()
                item['college'] = _required(college, 'college', student).to_dict()
                result.append(item)
            return result

    def registrations_with_event_and_student(self) -> List[Dict[str, Any]]:
        """Every registration with its event and student, most recent first."""
        with self.database.session() as session:
            rows = (
                session.query(Registration, Event, Student)
                .outerjoin(Event, Registration.event_id == Event.id)
                .outerjoin(Student, Registration.student_id == Student.id)
                .order_by(Registration.registered_at.desc())
                .all()
            )
            result = []
            for registration, event, student in rows:
                item = registration.to_dict()
                item['event'] = _required(event, 'event', registration).to_dict()
                item['student'] = _required(student, 'student', registration).to_dict()
                result.append(item)
            return result

    def attendance_for_event(self, event_id: str) -> List[Dict[str, Any]]:
        """Attendance records of one event, each with its registration and student."""
        with self.database.session() as session:
            rows = (
                session.query(Attendance, Registration, Student)
                .join(Registration, Attendance.registration_id == Registration.id)
                .join(Student, Registration.student_id == Student.id)
                .filter(Registration.event_id == event_id)
                .all()
            )
            result = []
            for attendance, registration, student in rows:
                item = attendance.to_dict()
                item['registration'] = _registration_with_student(registration, student)
                result.append(item)
            return result

    def feedback_for_event(self, event_id: str) -> List[Dict[str, Any]]:
        """Feedback of one event, each with its registration and student."""
        with self.database.session() as session:
            rows = (
                session.query(Feedback, Registration, Student)
                .join(Registration, Feedback.registration_id == Registration.id)
                .join(Student, Registration.student_id == Student.id)
                .filter(Registration.event_id == event_id)
                .all()
            )
            result = []
            for feedback, registration, student in rows:
                item = feedback.to_dict()
                item['registration'] = _registration_with_student(registration, student)
                result.append(item)
            return result
