"""Common Schemas — response shapes shared by every resource route.

Invariants:
    - ErrorResponse mirrors IndiaError.to_response(): error, code, category, details?
    - Record bodies are not modelled: rows are returned as stored
"""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing request."""
    error: str
    code: str
    category: str
    details: Any | None = None


class DeleteResponse(BaseModel):
    """Acknowledgment for a successful delete."""
    message: str
    id: str


class HealthResponse(BaseModel):
    status: str
    app: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing identity or invalid payload"},
    404: {"model": ErrorResponse, "description": "Record not found for this user"},
    500: {"model": ErrorResponse, "description": "Store or internal failure"},
}
