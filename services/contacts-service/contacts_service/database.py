"""
Database configuration and connection management.

Builds the SQLAlchemy engine and session factory from application settings.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import settings
from .models import Base

logger = logging.getLogger(__name__)


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


def sanitize_url(db_url: str) -> str:
    """Strip credentials from a database URL for logging."""
    if "@" not in db_url:
        return db_url
    scheme = db_url.split("://", 1)[0]
    host = db_url.rsplit("@", 1)[1]
    return f"{scheme}://***@{host}"


def create_db_engine(db_url: Optional[str] = None, **kwargs) -> Engine:
    """
    Create a SQLAlchemy engine.

    Args:
        db_url: Database connection URL, defaults to settings.DATABASE_URL
        **kwargs: Extra arguments forwarded to create_engine

    Returns:
        Configured engine
    """
    db_url = db_url or settings.DATABASE_URL
    logger.info(f"Using database: {sanitize_url(db_url)}")

    options = {
        "connect_args": get_connect_args(db_url),
        "pool_pre_ping": settings.DB_POOL_PRE_PING,
        "echo": settings.DB_ECHO,
    }
    options.update(kwargs)
    return create_engine(db_url, **options)


engine = create_db_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database tables.

    Uses checkfirst=True to safely handle existing tables.

    Args:
        bind: Engine to create tables on, defaults to the module engine
    """
    try:
        logger.info("Initializing database tables...")
        Base.metadata.create_all(bind=bind or engine, checkfirst=True)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def get_db() -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        SQLAlchemy database session, closed when the caller is done
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
