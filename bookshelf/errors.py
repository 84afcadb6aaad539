"""
API Errors

Error types raised by the service layer and the helpers that turn them into
the uniform error body:

    {"error": {"message": <message>, "status": <status>}, "message": <message>}

Request body validation is done by pydantic; format_validation_errors()
translates its error list into JSON-schema style violation strings such as
'instance requires property "isbn"'.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

ErrorMessage = str | list[str]


class APIError(Exception):
    """
    Base class for errors that map to an HTTP response.

    Attributes:
        message: String (or list of strings) sent to the client
        status_code: HTTP status of the response
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: ErrorMessage, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(APIError):
    """Raised when no book matches the requested isbn."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, isbn: str) -> None:
        # The message has no closing quote after the isbn; clients match it verbatim.
        super().__init__(f"There is no book with an isbn '{isbn}")
        self.isbn = isbn


class SchemaValidationError(APIError):
    """Raised when a request body does not match the book schema."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, messages: list[str]) -> None:
        super().__init__(messages)
        self.messages = messages


def error_body(message: ErrorMessage, status_code: int) -> dict[str, Any]:
    """Build the uniform error body."""
    return {
        "error": {"message": message, "status": status_code},
        "message": message,
    }


def error_response(message: ErrorMessage, status_code: int) -> JSONResponse:
    """Build a JSONResponse carrying the uniform error body."""
    return JSONResponse(
        status_code=status_code,
        content=error_body(message, status_code),
    )


# =============================================================================
# Validation Message Formatting
# =============================================================================
# pydantic error type -> JSON type name
_TYPE_NAMES = {
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "float_type": "number",
    "list_type": "array",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}


def _instance_path(loc: Sequence[str | int]) -> str:
    """Render a location like ("pages",) as "instance.pages"."""
    path = "instance"
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def format_validation_error(error: dict[str, Any]) -> str:
    """
    Translate one pydantic error into a violation string.

    The leading "body" element FastAPI adds to request body locations is
    dropped, so ("body", "pages") becomes "instance.pages".

    Examples:
        missing isbn        -> instance requires property "isbn"
        pages is a string   -> instance.pages is not of a type(s) integer
        body is not a dict  -> instance is not of a type(s) object
    """
    loc = list(error.get("loc", ()))
    if loc and loc[0] == "body":
        loc = loc[1:]
    error_type = error.get("type", "")

    if error_type == "json_invalid":
        return "instance is not valid JSON"

    if error_type == "missing":
        if not loc:
            return "instance is not of a type(s) object"
        *parent, name = loc
        return f'{_instance_path(parent)} requires property "{name}"'

    if error_type in _TYPE_NAMES:
        return f"{_instance_path(loc)} is not of a type(s) {_TYPE_NAMES[error_type]}"

    return f"{_instance_path(loc)} {error.get('msg', 'is invalid')}"


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[str]:
    """Translate a pydantic error list, dropping duplicate messages."""
    messages: list[str] = []
    for error in errors:
        message = format_validation_error(error)
        if message not in messages:
            messages.append(message)
    return messages
