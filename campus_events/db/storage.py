"""Entity store: create/read/update/delete for every entity type.

Lookups return ``None`` and deletes return ``False`` for unknown ids; turning
that into a 404 is the caller's job. Store errors (constraint violations,
connectivity) propagate unchanged.
"""

import logging
from typing import List, Optional, Type, TypeVar

from .db_core import Database
from ..models import Attendance, College, Event, Feedback, Registration, Student
from ..models.base import Base
from ..models.schemas import (
    AttendanceCreate,
    CamelModel,
    CollegeCreate,
    CollegeUpdate,
    EventCreate,
    EventUpdate,
    FeedbackCreate,
    RegistrationCreate,
    StudentCreate,
    StudentUpdate,
)
from ..utils.timezone import now_utc

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=Base)


class EntityStore:
    """CRUD primitives over the relational store."""

    def __init__(self, database: Database):
        self.database = database

    # Generic helpers

    def _get(self, model: Type[ModelT], entity_id: str) -> Optional[ModelT]:
        with self.database.session() as session:
            return session.get(model, entity_id)

    def _create(self, row: ModelT) -> ModelT:
        with self.database.session() as session:
            session.add(row)
            session.flush()
            session.refresh(row)
        logger.debug(f"Created {row}")
        return row

    def _update(self, model: Type[ModelT], entity_id: str, patch: CamelModel) -> Optional[ModelT]:
        with self.database.session() as session:
            row = session.get(model, entity_id)
            if row is None:
                return None
            for field, value in patch.changes().items():
                setattr(row, field, value)
            row.updated_at = now_utc()
            session.flush()
            session.refresh(row)
            return row

    def _delete(self, model: Type[ModelT], entity_id: str) -> bool:
        # Bulk delete so dependents are governed by the store's foreign keys, not ORM cascades
        with self.database.session() as session:
            deleted = session.query(model).filter(model.id == entity_id).delete(synchronize_session=False)
        removed = deleted > 0
        if removed:
            logger.info(f"Deleted {model.__name__} {entity_id}")
        return removed

    # Colleges

    def list_colleges(self) -> List[College]:
        with self.database.session() as session:
            return session.query(College).order_by(College.name).all()

    def get_college(self, college_id: str) -> Optional[College]:
        return self._get(College, college_id)

    def create_college(self, data: CollegeCreate) -> College:
        return self._create(College(**data.model_dump()))

    def update_college(self, college_id: str, patch: CollegeUpdate) -> Optional[College]:
        return self._update(College, college_id, patch)

    def delete_college(self, college_id: str) -> bool:
        return self._delete(College, college_id)

    # Events

    def get_event(self, event_id: str) -> Optional[Event]:
        return self._get(Event, event_id)

    def create_event(self, data: EventCreate) -> Event:
        return self._create(Event(**data.model_dump()))

    def update_event(self, event_id: str, patch: EventUpdate) -> Optional[Event]:
        return self._update(Event, event_id, patch)

    def delete_event(self, event_id: str) -> bool:
        return self._delete(Event, event_id)

    # Students

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._get(Student, student_id)

    def create_student(self, data: StudentCreate) -> Student:
        return self._create(Student(**data.model_dump()))

    def update_student(self, student_id: str, patch: StudentUpdate) -> Optional[Student]:
        return self._update(Student, student_id, patch)

    def delete_student(self, student_id: str) -> bool:
        return self._delete(Student, student_id)

    # Registrations (immutable once created)

    def get_registration(self, registration_id: str) -> Optional[Registration]:
        return self._get(Registration, registration_id)

    def create_registration(self, data: RegistrationCreate) -> Registration:
        return self._create(Registration(**data.model_dump()))

    def delete_registration(self, registration_id: str) -> bool:
        return self._delete(Registration, registration_id)

    # Attendance

    def get_attendance(self, attendance_id: str) -> Optional[Attendance]:
        return self._get(Attendance, attendance_id)

    def mark_attendance(self, data: AttendanceCreate) -> Attendance:
        return self._create(Attendance(**data.model_dump()))

    def update_attendance(self, attendance_id: str, attended: bool) -> Optional[Attendance]:
        """Set ``attended`` and refresh ``marked_at``."""
        with self.database.session() as session:
            row = session.get(Attendance, attendance_id)
            if row is None:
                return None
            row.attended = attended
            row.marked_at = now_utc()
            session.flush()
            session.refresh(row)
            return row

    # Feedback

    def get_feedback(self, feedback_id: str) -> Optional[Feedback]:
        return self._get(Feedback, feedback_id)

    def submit_feedback(self, data: FeedbackCreate) -> Feedback:
        return self._create(Feedback(**data.model_dump()))
