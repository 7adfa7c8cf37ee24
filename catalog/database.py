"""
Database configuration and connection management.

Builds the SQLAlchemy engine and session factory from the application
settings. Only the SQLAlchemy-backed repositories depend on this module.
"""

import logging
import time
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import settings
from .models import Base

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """
    Get database URL from settings.

    Returns:
        Database connection URL
    """
    db_url = settings.DATABASE_URL

    # Sanitize for logging
    if "@" in db_url:
        safe_url = db_url.split("@")[0] + "@..."
    else:
        safe_url = db_url

    logger.info(f"Using database: {safe_url}")
    return db_url


def get_connect_args(db_url: str) -> dict:
    """
    Get database-specific connection arguments.

    Args:
        db_url: Database connection URL

    Returns:
        Connection arguments dict
    """
    if "sqlite" in db_url:
        return {"check_same_thread": False}
    return {}


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Track query start time."""
    conn.info.setdefault("query_start_time", []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log slow queries."""
    total_time_ms = (time.time() - conn.info["query_start_time"].pop()) * 1000

    if total_time_ms > settings.SLOW_QUERY_THRESHOLD_MS:
        logger.warning(
            f"Slow query detected: {total_time_ms:.2f}ms",
            extra={
                "query_time_ms": total_time_ms,
                "statement": statement[:200],
            },
        )


def create_db_engine(db_url: str) -> Engine:
    """
    Create an engine for the given URL.

    Args:
        db_url: Database connection URL

    Returns:
        SQLAlchemy engine
    """
    return create_engine(
        db_url,
        connect_args=get_connect_args(db_url),
        pool_pre_ping=True,
        echo=settings.DATABASE_ECHO,
    )


engine = create_db_engine(get_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """
    Initialize database tables.

    Uses checkfirst=True to safely handle existing tables.

    Args:
        bind: Engine to create the tables on
    """
    logger.info("Initializing database tables...")
    Base.metadata.create_all(bind=bind, checkfirst=True)
    logger.info("Database initialized successfully")


def get_db() -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
