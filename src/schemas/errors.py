"""
Error response schemas for API endpoints.

Every error this API produces has the shape `{"error": {"message": "..."}}`.
"""
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Human-readable error detail."""

    message: str = Field(description="Description of what went wrong")


class ErrorResponse(BaseModel):
    """Structured error body returned with every 4xx/5xx response."""

    error: ErrorDetail


def error_body(message: str) -> dict:
    """Build a JSON-ready error body for `message`."""
    return ErrorResponse(error=ErrorDetail(message=message)).model_dump()
