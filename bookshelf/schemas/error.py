"""
Error Pydantic Schemas

Documents the uniform error body in the OpenAPI schema:

    {"error": {"message": ..., "status": 404}, "message": ...}

The top-level message duplicates error.message. Validation failures carry
a list of violation strings instead of a single string.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    message: str | list[str]
    status: int


class ErrorResponse(BaseModel):
    error: ErrorDetail
    message: str | list[str]
