"""
Book Model

The only model of the Bookshelf API, representing books in the database.

The ISBN is the natural key of a book, so it is used directly as the
primary key instead of a surrogate integer id. It is never updated once a
row exists.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.database import Base


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields (all required):
    - isbn: International Standard Book Number (primary key)
    - amazon_url: Link to the book's store page
    - author: Author name
    - language: Language the book is written in
    - pages: Number of pages
    - publisher: Publisher name
    - title: Book title
    - year: Year of publication

    Example:
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
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    isbn: Mapped[str] = mapped_column(
        Text,
        primary_key=True,
        comment="International Standard Book Number"
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    amazon_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Store page URL"
    )

    author: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Author name"
    )

    language: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Language of the book"
    )

    pages: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages in the book"
    )

    publisher: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Publisher name"
    )

    title: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Year of publication"
    )

    def __repr__(self) -> str:
        return f"Book(isbn='{self.isbn}', title='{self.title}')"
