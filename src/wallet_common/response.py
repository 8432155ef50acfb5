"""JSON error body shared by every endpoint.

Errors are returned as:
{
    "error": "insufficient funds"
}

Server-side failures always use GENERIC_ERROR_MESSAGE so internal
details never reach the client.
"""

from pydantic import BaseModel

GENERIC_ERROR_MESSAGE = "Internal server error"


class ErrorResponse(BaseModel):
    error: str


def error_response(message: str) -> ErrorResponse:
    return ErrorResponse(error=message)
