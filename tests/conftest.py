"""Shared fixtures: a fresh in-memory database per test and a small data factory."""

import os
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

os.environ.setdefault('ENVIRONMENT', 'development')

from fastapi.testclient import TestClient

from campus_events.api.app import create_application
from campus_events.db import Database, DatabaseConfig, EntityStore, RelationshipJoiner
from campus_events.models.schemas import (
    AttendanceCreate,
    CollegeCreate,
    EventCreate,
    FeedbackCreate,
    RegistrationCreate,
    StudentCreate,
)
from campus_events.reports import ReportService

BASE_DATE = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)


class DataFactory:
    """Creates rows through the entity store with sensible defaults."""

    def __init__(self, store: EntityStore):
        self.store = store
        self._sequence = count(1)

    def college(self, name=None):
        return self.store.create_college(CollegeCreate(name=name or f"College {next(self._sequence)}"))

    def event(self, college=None, name=None, days=0, max_capacity=50, date=None):
        college = college or self.college()
        number = next(self._sequence)
        return self.store.create_event(EventCreate(
            college_id=college.id,
            name=name or f"Event {number}",
            type="Workshop",
            description="Hands-on session",
            date=date or BASE_DATE + timedelta(days=days),
            max_capacity=max_capacity,
            created_by="Events Office",
        ))

    def student(self, college=None, name=None):
        college = college or self.college()
        number = next(self._sequence)
        return self.store.create_student(StudentCreate(
            college_id=college.id,
            name=name or f"Student {number}",
            email=f"student{number}@campus.edu",
        ))

    def register(self, event, student):
        return self.store.create_registration(RegistrationCreate(event_id=event.id, student_id=student.id))

    def attend(self, registration, attended=True):
        return self.store.mark_attendance(AttendanceCreate(registration_id=registration.id, attended=attended))

    def rate(self, registration, rating, comment=None):
        return self.store.submit_feedback(FeedbackCreate(
            registration_id=registration.id,
            rating=rating,
            comment=comment,
        ))


@pytest.fixture
def database():
    db = Database(DatabaseConfig(url="sqlite://"))
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def store(database) -> EntityStore:
    return EntityStore(database)


@pytest.fixture
def joiner(database) -> RelationshipJoiner:
    return RelationshipJoiner(database)


@pytest.fixture
def reports(database) -> ReportService:
    return ReportService(database)


@pytest.fixture
def factory(store) -> DataFactory:
    return DataFactory(store)


@pytest.fixture
def client(database):
    app = create_application(database=database)
    with TestClient(app) as test_client:
        yield test_client
