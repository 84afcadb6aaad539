"""
pytest Fixtures for Bookshelf API Tests

Fixtures used across all test files:
- engine: SQLite in-memory engine shared by the whole session
- db_session: a session wrapped in a transaction rolled back after each test
- client: TestClient for an app built against the test engine
- sample_book / book_payload: test data
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app, so the module-level
# app in bookshelf.main is built against SQLite instead of PostgreSQL.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookshelf.config import Settings
from bookshelf.database import Base, get_db
from bookshelf.main import create_app
from bookshelf.models import Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the entire session;
    without it the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection with an open transaction that is
    rolled back after the test, so commits made by the code under test
    never leak into the next test.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=connection,
    )()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an app under test."""
    return Settings(database_url="sqlite://", environment="test")


@pytest.fixture(scope="function")
def app(engine, test_settings):
    """Application built against the test engine."""
    return create_app(settings=test_settings, engine=engine)


@pytest.fixture(scope="function")
def client(app, db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    get_db is overridden to hand out the per-test session.
    """

    def override_get_db():
        """Provide test database session instead of a new one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def book_payload() -> dict:
    """A complete, valid book body for POST /books."""
    return {
        "isbn": "0691118",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    }


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Insert a book directly through the session."""
    book = Book(
        isbn="0691161518",
        amazon_url="http://a.co/eobPtX2",
        author="Matthew Lane",
        language="english",
        pages=264,
        publisher="Princeton University Press",
        title="Power-Up: Unlocking the Hidden Mathematics in Video Games",
        year=2017,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def sample_book_json(sample_book: Book) -> dict:
    """The JSON representation the API returns for sample_book."""
    return {
        "isbn": sample_book.isbn,
        "amazon_url": sample_book.amazon_url,
        "author": sample_book.author,
        "language": sample_book.language,
        "pages": sample_book.pages,
        "publisher": sample_book.publisher,
        "title": sample_book.title,
        "year": sample_book.year,
    }
