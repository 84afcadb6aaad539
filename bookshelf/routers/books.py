"""
Books Router

CRUD endpoints for books, keyed by isbn.

Request bodies are validated by the BookCreate/BookUpdate schemas before a
handler runs; schema violations become 400 responses in main.py. Lookups
that miss raise NotFoundError from the service layer, which becomes a 404.
"""

from fastapi import APIRouter, status

from bookshelf.dependencies import DbSession
from bookshelf.schemas import (
    BookCreate,
    BookEnvelope,
    BookListEnvelope,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
)
from bookshelf.services import books as book_service

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "",
    response_model=BookListEnvelope,
    summary="List all books",
    description="Get every book in the store, ordered by title.",
)
def list_books(db: DbSession) -> BookListEnvelope:
    """List all books."""
    books = book_service.list_books(db)
    return BookListEnvelope(
        books=[BookResponse.model_validate(book) for book in books]
    )


@router.get(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Get a book by isbn",
    description="Retrieve a single book.",
)
def get_book(isbn: str, db: DbSession) -> BookEnvelope:
    """
    Get a single book by its isbn.

    Raises:
        NotFoundError: 404 if no book has this isbn
    """
    book = book_service.get_book(db, isbn)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book. Every field is required.",
    responses={400: {"model": ErrorResponse, "description": "Invalid book data"}},
)
def create_book(book_data: BookCreate, db: DbSession) -> BookEnvelope:
    """
    Create a new book.

    Args:
        book_data: Validated book data from request body
        db: Database session

    Returns:
        The created book
    """
    book = book_service.create_book(db, book_data)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.put(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Update a book",
    description="Replace every field of a book except its isbn.",
    responses={400: {"model": ErrorResponse, "description": "Invalid book data"}},
)
def update_book(isbn: str, book_data: BookUpdate, db: DbSession) -> BookEnvelope:
    """
    Update an existing book.

    PUT semantics: all fields except isbn are required and replaced.

    Raises:
        NotFoundError: 404 if no book has this isbn
    """
    book = book_service.update_book(db, isbn, book_data)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    summary="Delete a book",
    description="Permanently delete a book from the database.",
)
def delete_book(isbn: str, db: DbSession) -> MessageResponse:
    """
    Delete a book.

    Raises:
        NotFoundError: 404 if no book has this isbn
    """
    book_service.delete_book(db, isbn)
    return MessageResponse(message="Book deleted")
