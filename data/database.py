"""
Database connection and session management.

Provides utilities for creating database engine, sessions, and table initialization.
"""
import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from config.settings import settings
from .db_models import Base

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = 'sqlite:///taxonomy_tree.db'


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, database_url: Optional[str] = None):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy database URL. If None, uses the configured
                         URL or the default SQLite path.
        """
        self.database_url = database_url or settings.database_url or DEFAULT_DATABASE_URL

        if self.database_url.startswith('sqlite'):
            self.engine = create_engine(
                self.database_url,
                connect_args={'check_same_thread': False},
                echo=False
            )
        else:
            self.engine = create_engine(self.database_url, echo=False)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_tables(self):
        """Create all database tables."""
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database tables created at: {self.database_url}")

    def drop_tables(self):
        """Drop all database tables. Use with caution!"""
        Base.metadata.drop_all(bind=self.engine)
        logger.info(f"Database tables dropped from: {self.database_url}")

    def get_session(self) -> Session:
        """
        Get a new database session.

        Close the session when done, or use the session context manager instead.
        """
        return self.SessionLocal()

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on exception.

        Usage:
            with db_manager.session() as session:
                # ... use session ...
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


# Managers keyed by database URL
_db_managers = {}


def get_db_manager(database_url: Optional[str] = None) -> DatabaseManager:
    """
    Get or create the database manager for a URL.

    Args:
        database_url: Optional database URL (defaults to the configured one)

    Returns:
        DatabaseManager instance
    """
    url = database_url or settings.database_url or DEFAULT_DATABASE_URL
    if url not in _db_managers:
        _db_managers[url] = DatabaseManager(url)
    return _db_managers[url]


def init_database(database_url: Optional[str] = None) -> DatabaseManager:
    """
    Initialize database by creating all tables.

    Args:
        database_url: Optional database URL

    Returns:
        DatabaseManager used
    """
    db_manager = get_db_manager(database_url)
    db_manager.create_tables()
    return db_manager


@contextmanager
def session_scope(database_url: Optional[str] = None) -> Generator[Session, None, None]:
    """
    Context manager for database sessions using the shared manager.

    Usage:
        with session_scope() as session:
            tree = HierarchyTreeRepository(session).get_latest()
    """
    with get_db_manager(database_url).session() as session:
        yield session
