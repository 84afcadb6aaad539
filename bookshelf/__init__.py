"""
Bookshelf API

A small FastAPI service exposing CRUD operations over books stored in a
relational table.
"""

__version__ = "1.0.0"
