"""
SQLAlchemy Models Package

Models are SQLAlchemy ORM classes that map to database tables.

Import all models here to:
1. Make them available as: from bookshelf.models import Book
2. Ensure Alembic discovers them for migrations
"""

from bookshelf.models.book import Book

__all__ = [
    "Book",
]
