"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schemas are kept apart from the SQLAlchemy models so the API contract can
differ from the table layout (the update body has no isbn, responses are
wrapped in envelopes).
"""

from bookshelf.schemas.book import (
    BookCreate,
    BookEnvelope,
    BookFields,
    BookListEnvelope,
    BookResponse,
    BookUpdate,
    MessageResponse,
)
from bookshelf.schemas.error import ErrorDetail, ErrorResponse

__all__ = [
    # Book schemas
    "BookFields",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookEnvelope",
    "BookListEnvelope",
    "MessageResponse",
    # Error schemas
    "ErrorDetail",
    "ErrorResponse",
]
