"""
API Routers Package

Router Structure:
- books.py: /books/* endpoints

Each router is imported and registered in main.py.
"""

from bookshelf.routers.books import router as books_router

__all__ = [
    "books_router",
]
