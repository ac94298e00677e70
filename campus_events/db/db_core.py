"""Core database functionality and configuration.

This module provides the database handle used by the rest of the package:
configuration, engine setup, schema creation and transactional sessions.
A ``Database`` is created explicitly (by the application lifespan, a script
or a test fixture) and disposed by whoever created it.
"""

from contextlib import contextmanager
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Generator
import os

from sqlalchemy import create_engine, event, inspect, Engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models import Base
from ..config.environment import IS_PRODUCTION_ENVIRONMENT

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_PATH = Path(__file__).parent.parent.parent / 'data' / 'campus_events.db'


class DatabaseConfig:
    """Database configuration settings."""

    def __init__(
        self,
        url: Optional[str] = None,
        sqlite_path: Optional[Path] = None,
        echo: bool = False,
        pool_size: int = 3,
        max_overflow: int = 4,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True
    ):
        """
        Initialize database configuration.

        The connection URL is resolved in this order: the explicit ``url``
        argument, the DATABASE_URL environment variable, and finally (outside
        production only) a SQLite file.

        Args:
            url: Full SQLAlchemy connection URL
            sqlite_path: Path to SQLite database file (development fallback)
            echo: Whether to echo SQL statements
            pool_size: Size of the connection pool (permanent connections)
            max_overflow: Maximum number of extra connections to allow temporarily
            pool_timeout: Seconds to wait for an available connection
            pool_recycle: Seconds before connections are recycled (prevent stale)
            pool_pre_ping: Whether to ping connections before using them

        Raises:
            ValueError: If in production environment and no database URL is provided
                      either via ``url`` or the DATABASE_URL env variable
        """
        self.url = url or os.environ.get('DATABASE_URL')
        if not self.url and IS_PRODUCTION_ENVIRONMENT:
            raise ValueError(
                "Database URL must be provided either via url parameter "
                "or DATABASE_URL environment variable when in production environment"
            )
        self.sqlite_path = None if self.url else (sqlite_path or DEFAULT_SQLITE_PATH)

        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.pool_pre_ping = pool_pre_ping

    @property
    def connection_url(self) -> str:
        """Get the database connection URL."""
        if self.url:
            return self.url
        return f"sqlite:///{self.sqlite_path}"

    @property
    def is_sqlite(self) -> bool:
        return self.connection_url.startswith('sqlite')

    @property
    def is_in_memory(self) -> bool:
        if not self.is_sqlite:
            return False
        database_file = make_url(self.connection_url).database
        return database_file in (None, '', ':memory:') or 'mode=memory' in self.connection_url

    def get_engine_args(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine arguments based on configuration."""
        args: Dict[str, Any] = {"echo": self.echo}

        # SQLite-specific configuration
        if self.is_sqlite:
            args["connect_args"] = {"check_same_thread": False}
            if self.is_in_memory:
                # One shared connection, otherwise every session sees an empty database
                args["poolclass"] = StaticPool

        # Server database configuration
        else:
            args.update({
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_timeout": self.pool_timeout,
                "pool_recycle": self.pool_recycle,
                "pool_pre_ping": self.pool_pre_ping
            })

        return args


class DatabaseError(Exception):
    """Base exception for database-related errors."""
    pass


class ConnectionError(DatabaseError):
    """Raised when the database engine cannot be set up."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and hands out transactional sessions."""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self.engine: Optional[Engine] = None
        self._session_factory = sessionmaker(expire_on_commit=False)
        self._tables_checked = False
        self._setup_engine()

    def _setup_engine(self) -> None:
        """Set up the SQLAlchemy engine."""
        try:
            self.engine = create_engine(
                self.config.connection_url,
                **self.config.get_engine_args()
            )
            if self.config.is_sqlite:
                event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
            self._session_factory.configure(bind=self.engine)
        except Exception as e:
            raise ConnectionError(f"Failed to create database engine: {e}") from e

    def init_db(self) -> None:
        """Create all tables."""
        if not self.engine:
            raise ConnectionError("Database engine not initialized")

        if self.config.is_sqlite and not self.config.is_in_memory:
            database_file = make_url(self.config.connection_url).database
            Path(database_file).parent.mkdir(parents=True, exist_ok=True)
        with self.engine.begin() as conn:
            Base.metadata.create_all(conn)
        self._tables_checked = True
        logger.info("Database schema initialized successfully")

    def ensure_tables_exist(self) -> None:
        """Create the schema if any table is missing."""
        if self._tables_checked:
            return
        if not self.engine:
            raise ConnectionError("Database engine not initialized")

        try:
            existing_tables = set(inspect(self.engine).get_table_names())
        except Exception as e:
            raise DatabaseError(f"Failed to inspect database schema: {e}") from e

        required_tables = set(Base.metadata.tables)
        if not required_tables.issubset(existing_tables):
            logger.info("Some tables missing, initializing database schema")
            self.init_db()
        self._tables_checked = True

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Commits when the block exits normally. On any error the transaction
        is rolled back and the original exception propagates unchanged.

        Example:
            with database.session() as session:
                college = session.get(College, college_id)
                college.name = "New Name"
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Close every pooled connection."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connections closed")
