"""Domain errors raised by repositories and services."""


class AppError(Exception):
    """Base application error."""

    default_message = "Application error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Resource not found."""

    default_message = "Resource not found"


class ConflictError(AppError):
    """Resource already exists."""

    default_message = "Resource already exists"


class ValidationError(AppError):
    """Validation error."""

    default_message = "Validation error"


class ForbiddenError(AppError):
    """Caller is not allowed to perform the operation."""

    default_message = "Forbidden"


class ContentRejectedError(ValidationError):
    """User-generated text contains banned words; nothing was written."""

    def __init__(self, matched_words: list[str], subject: str = "Content"):
        self.matched_words = list(matched_words)
        self.subject = subject
        super().__init__(f"{subject} contains sensitive words: {', '.join(self.matched_words)}")


class StoreUnavailableError(AppError):
    """Word store could not be read. Absorbed by the sensitive-word cache."""

    default_message = "Sensitive word store unavailable"
