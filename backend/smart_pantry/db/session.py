"""
Database Session Management
Creates and manages SQLAlchemy database engine and session factory.

This module sets up the database connection using SQLAlchemy 2.0 style
and provides a session factory for creating database sessions in endpoints.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from smart_pantry.core.config import settings


# SQLite connections are bound to the creating thread unless told otherwise;
# FastAPI runs sync endpoints in a threadpool.
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

# Create SQLAlchemy engine
# - echo=settings.DEBUG: Log all SQL queries when debug mode is enabled
# - pool_pre_ping=True: Verify connections before using them
# - pool_recycle=3600: Recycle connections after 1 hour
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=connect_args,
)

# Session factory
# - autocommit=False: Require explicit commit() calls
# - autoflush=False: Require explicit flush() calls
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that provides database sessions to FastAPI endpoints.

    Yields:
        Database session object

    Usage in FastAPI endpoint:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()

    The session is closed after the endpoint returns, even if an exception occurs.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
