"""FastAPI dependencies that hand route handlers the store, joiner and reports.

The ``Database`` lives on ``app.state`` for the lifetime of the application;
the thin objects wrapping it are created per request.
"""

from fastapi import Depends, Request

from ..db import Database, EntityStore, RelationshipJoiner
from ..reports import ReportService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_store(database: Database = Depends(get_database)) -> EntityStore:
    return EntityStore(database)


def get_joiner(database: Database = Depends(get_database)) -> RelationshipJoiner:
    return RelationshipJoiner(database)


def get_reports(database: Database = Depends(get_database)) -> ReportService:
    return ReportService(database)
