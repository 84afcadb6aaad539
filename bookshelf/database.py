"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Bookshelf API.

Nothing here connects at import time. The engine and the session factory
are built explicitly and handed to the application factory:

    settings = get_settings()
    engine = create_db_engine(settings)
    app = create_app(settings=settings, engine=engine)

create_app() stores the session factory on app.state, and get_db() reads it
from there for every request.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Use session for all database operations in that request
3. Commit on success (done by the service layer)
4. Close session when request ends, rolling back anything uncommitted
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookshelf.config import Settings


# =============================================================================
# Engine and Session Factory
# =============================================================================
def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine described by the settings.

    PostgreSQL engines get a sized connection pool and pool_pre_ping so stale
    connections are replaced transparently. SQLite engines skip the pool
    sizing (SQLite pools do not accept it) and allow use across threads,
    since FastAPI runs sync endpoints in a threadpool.

    Args:
        settings: Application settings

    Returns:
        Configured Engine (no connection is opened yet)
    """
    if settings.is_sqlite:
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
        )

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=settings.debug,  # Log SQL in debug mode
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create a session factory bound to the given engine.

    - autocommit=False: the service layer decides when to commit
    - autoflush=False: no implicit flush before queries
    """
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Opens a session from the factory the application was built with, yields
    it to the route handler and closes it when the request ends. The finally
    block ensures cleanup happens even if the handler raises.

    Usage in Routes:
        @router.get("/books")
        def list_books(db: DbSession):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables(engine: Engine) -> None:
    """
    Create all database tables.

    Useful for development and tests. In production, use alembic migrations:
    this function doesn't track schema changes or allow rollbacks.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables(engine: Engine) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    Base.metadata.drop_all(bind=engine)
