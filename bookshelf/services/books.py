"""
Books Service

Resource access for the books table. Every function takes the request's
database session as its first argument; lookups by isbn raise NotFoundError
when no row matches.

Writes are committed here, so a route handler never has to touch the
session directly.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookshelf.errors import NotFoundError
from bookshelf.models import Book
from bookshelf.schemas import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


def list_books(db: Session) -> list[Book]:
    """Return every book, ordered by title."""
    stmt = select(Book).order_by(Book.title)
    books = list(db.execute(stmt).scalars().all())
    logger.debug(f"Listed {len(books)} books")
    return books


def get_book(db: Session, isbn: str) -> Book:
    """
    Get a book by isbn.

    Args:
        db: Database session
        isbn: ISBN of the book to find

    Returns:
        Book instance

    Raises:
        NotFoundError: if no book has this isbn
    """
    book = db.get(Book, isbn)
    if book is None:
        raise NotFoundError(isbn)
    return book


def create_book(db: Session, book_data: BookCreate) -> Book:
    """
    Insert a new book and return the stored row.

    A duplicate isbn surfaces as an IntegrityError from the commit.
    """
    book = Book(**book_data.model_dump())
    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Created book {book.isbn}")
    return book


def update_book(db: Session, isbn: str, book_data: BookUpdate) -> Book:
    """
    Replace every field of a book except its isbn.

    Args:
        db: Database session
        isbn: ISBN of the book to update
        book_data: New values for all other fields

    Returns:
        Updated book

    Raises:
        NotFoundError: if no book has this isbn
    """
    book = get_book(db, isbn)

    for field, value in book_data.model_dump().items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)

    logger.info(f"Updated book {isbn}")
    return book


def delete_book(db: Session, isbn: str) -> None:
    """
    Delete a book.

    Raises:
        NotFoundError: if no book has this isbn
    """
    book = get_book(db, isbn)
    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {isbn}")
