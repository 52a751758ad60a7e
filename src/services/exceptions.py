"""Shared exceptions for service layer operations."""


class BookmarkValidationError(Exception):
    """Raised when a bookmark payload fails request validation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BookmarkNotFoundError(Exception):
    """Raised when no bookmark exists for the requested ID."""

    message = "Bookmark doesn't exist!"

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(self.message)


class StoreError(Exception):
    """
    Raised when the underlying database fails.

    Wraps the driver/ORM exception (available as __cause__). The service layer
    does not retry or recover; the API's fallback handler turns it into a 500.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
