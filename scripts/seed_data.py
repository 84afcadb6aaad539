#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books for development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

    # Keep existing rows and only add the samples
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings (DATABASE_URL)
2. Creates the books table if it doesn't exist
3. Clears existing books (unless --keep is given)
4. Inserts the sample books
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookshelf.config import get_settings
from bookshelf.database import create_db_engine, create_session_factory, create_tables
from bookshelf.models import Book

SAMPLE_BOOKS = [
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    },
    {
        "isbn": "0451524934",
        "amazon_url": "https://www.amazon.com/dp/0451524934",
        "author": "George Orwell",
        "language": "english",
        "pages": 328,
        "publisher": "Signet Classic",
        "title": "1984",
        "year": 1961,
    },
    {
        "isbn": "0141439513",
        "amazon_url": "https://www.amazon.com/dp/0141439513",
        "author": "Jane Austen",
        "language": "english",
        "pages": 480,
        "publisher": "Penguin Classics",
        "title": "Pride and Prejudice",
        "year": 2002,
    },
    {
        "isbn": "0553293354",
        "amazon_url": "https://www.amazon.com/dp/0553293354",
        "author": "Isaac Asimov",
        "language": "english",
        "pages": 255,
        "publisher": "Spectra",
        "title": "Foundation",
        "year": 1991,
    },
]


def clear_data(db: Session) -> None:
    """Clear all existing books from the database."""
    print("Clearing existing books...")
    db.execute(delete(Book))
    db.commit()
    print("Books cleared.")


def create_books(db: Session) -> list[Book]:
    """Insert the sample books."""
    print("Creating books...")

    books = [Book(**data) for data in SAMPLE_BOOKS]
    db.add_all(books)
    db.commit()

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing books before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    engine = create_db_engine(settings)
    create_tables(engine)
    db = create_session_factory(engine)()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nBooks: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the books table with sample data.")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing books instead of clearing them first",
    )
    args = parser.parse_args()

    seed_database(clear_existing=not args.keep)
