"""Routes package initialization."""

from . import (
    colleges,
    events,
    students,
    registrations,
    reports,
    health
)

__all__ = [
    'colleges',
    'events',
    'students',
    'registrations',
    'reports',
    'health'
]
