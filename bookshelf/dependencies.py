"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Annotated attaches the dependency to the type hint, so instead of writing:
    def list_books(db: Session = Depends(get_db)):

you can write:
    def list_books(db: DbSession):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookshelf.database import get_db

DbSession = Annotated[Session, Depends(get_db)]
