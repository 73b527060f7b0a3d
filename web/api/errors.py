"""API errors and validation helpers."""

from app.errors import (
    AppError,
    ConflictError,
    ContentRejectedError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "AppError",
    "ConflictError",
    "ContentRejectedError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "validate_id",
    "error_payload",
]


def validate_id(value: int, name: str = "id") -> None:
    """Validate a database id is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"Invalid {name}: {value!r}. Must be a positive integer")


def error_payload(error: AppError) -> dict:
    """Error body for API responses."""
    payload = {"error": type(error).__name__, "message": error.message}
    if isinstance(error, ContentRejectedError):
        payload["matched_words"] = error.matched_words
    return payload
