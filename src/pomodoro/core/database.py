"""
Database connection and session management.

This module handles:
- Database engine creation with connection pooling
- Session factory setup
- Connection health checks
- Retry logic for database initialization
"""

import time
from typing import Generator, Dict, Any
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
import logging

from pomodoro.core.config import get_settings
from pomodoro.core.exceptions import DatabaseException

logger = logging.getLogger('CORE_DATABASE')

settings = get_settings()

DATABASE_URL = settings.get_database_url()


def _engine_config(url: str) -> Dict[str, Any]:
    """
    Build engine keyword arguments for the configured backend.

    SQLite does not take pool sizing arguments; an in-memory SQLite database
    is shared through a single static connection so every session sees it.
    """
    if make_url(url).get_backend_name() == "sqlite":
        config: Dict[str, Any] = {
            'connect_args': {'check_same_thread': False},
            'echo': settings.db_echo,
        }
        if make_url(url).database in (None, "", ":memory:"):
            config['poolclass'] = StaticPool
        return config

    return {
        'poolclass': QueuePool,
        'pool_size': settings.db_pool_size,
        'max_overflow': settings.db_max_overflow,
        'pool_timeout': settings.db_pool_timeout,
        'pool_recycle': settings.db_pool_recycle,
        'pool_pre_ping': settings.db_pool_pre_ping,
        'echo': settings.db_echo,
    }


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement, which SQLite leaves off by default."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine_with_retry(url: str) -> Engine:
    """Create the engine, retrying while the database is not accepting connections."""
    logger.info(f"Initializing database connection to: {make_url(url).render_as_string(hide_password=True)}")

    retry_delays = [1, 2, 3, 5, 8]
    for i, delay in enumerate(retry_delays):
        try:
            created = create_engine(url, **_engine_config(url))
            if created.url.get_backend_name() == "sqlite":
                event.listen(created, "connect", _enable_sqlite_foreign_keys)
            # Test connection with health check
            with created.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Database connection established successfully on attempt {i+1}")
            return created
        except OperationalError as e:
            logger.error(f"Database not ready (attempt {i+1}/{len(retry_delays)}): {e}")
            if i < len(retry_delays) - 1:
                logger.info(f"Retrying in {delay} seconds...")
                time.sleep(delay)
            else:
                raise DatabaseException(f"Could not connect to the database after {len(retry_delays)} attempts") from e


engine = _create_engine_with_retry(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get a request-scoped database session.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @router.get("/categories")
        def get_categories(db: Session = Depends(get_db)):
            return db.query(Category).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_database_health() -> Dict[str, Any]:
    """
    Check database connection health and return status.

    Returns:
        dict: Health status with connection pool information
    """
    backend = engine.url.get_backend_name()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
            return {
                "status": "healthy",
                "connection_pool": engine.pool.status(),
                "backend": backend,
                "database": engine.url.database,
            }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "error": str(e),
            "backend": backend,
            "database": engine.url.database,
        }


def init_db() -> None:
    """
    Create all tables known to the ORM metadata.

    Safe to call on every startup; existing tables are left untouched.
    """
    from pomodoro.models import Base

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ensured")
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        raise
