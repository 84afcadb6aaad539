"""
Book Pydantic Schemas

Request schemas are strict: JSON types are not coerced, so "264" is not
accepted for pages and 2017 is not accepted for a string field. Every field
is required.

- BookUpdate: body of PUT /books/{isbn} (everything except isbn)
- BookCreate: body of POST /books (BookUpdate fields plus isbn)
- BookResponse: a stored book
- BookEnvelope / BookListEnvelope / MessageResponse: response wrappers
"""

from pydantic import BaseModel, ConfigDict, Field


class BookFields(BaseModel):
    """Fields shared by every book schema, except the isbn."""

    amazon_url: str = Field(
        ...,
        description="Store page URL",
        examples=["http://a.co/eobPtX2"],
    )
    author: str = Field(
        ...,
        description="Author name",
        examples=["Matthew Lane"],
    )
    language: str = Field(
        ...,
        description="Language the book is written in",
        examples=["english"],
    )
    pages: int = Field(
        ...,
        description="Number of pages",
        examples=[264],
    )
    publisher: str = Field(
        ...,
        description="Publisher name",
        examples=["Princeton University Press"],
    )
    title: str = Field(
        ...,
        description="Book title",
        examples=["Power-Up: Unlocking the Hidden Mathematics in Video Games"],
    )
    year: int = Field(
        ...,
        description="Year of publication",
        examples=[2017],
    )


class BookUpdate(BookFields):
    """
    Schema for replacing an existing book.

    The isbn comes from the URL and cannot be changed; an isbn key in the
    body is ignored.
    """

    model_config = ConfigDict(strict=True)


class BookCreate(BookFields):
    """
    Schema for creating a new book.

    Example request body:
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017
    }
    """

    isbn: str = Field(
        ...,
        description="ISBN, the unique identifier of the book",
        examples=["0691161518"],
    )

    model_config = ConfigDict(strict=True)


class BookResponse(BookFields):
    """Schema for a stored book, built from the ORM object."""

    isbn: str = Field(..., description="ISBN, the unique identifier of the book")

    model_config = ConfigDict(from_attributes=True)


class BookEnvelope(BaseModel):
    """Single book response: {"book": {...}}."""

    book: BookResponse


class BookListEnvelope(BaseModel):
    """Book list response: {"books": [...]}."""

    books: list[BookResponse]


class MessageResponse(BaseModel):
    """Plain message response, e.g. {"message": "Book deleted"}."""

    message: str
