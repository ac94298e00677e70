"""Database package initialization.

This module exposes the public interface of the database package.
"""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    ConnectionError,
)
from .storage import EntityStore
from .joins import RelationshipJoiner

__all__ = [
    # Core database classes
    'Database',
    'DatabaseConfig',

    # Exceptions
    'DatabaseError',
    'ConnectionError',

    # Store and joins
    'EntityStore',
    'RelationshipJoiner',
]
