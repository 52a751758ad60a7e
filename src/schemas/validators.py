"""Request validation rules for bookmark payloads."""
from schemas.bookmark import BOOKMARK_FIELDS, BookmarkCreate, BookmarkPatch
from services.exceptions import BookmarkValidationError


PATCH_REQUIRED_MESSAGE = (
    "Request body must contain either 'title', 'url', 'rating', or 'description'"
)


def validate_new_bookmark(data: BookmarkCreate) -> None:
    """
    Ensure all bookmark fields are present for a create.

    Fields are checked in a fixed order and only the first missing one is
    reported.

    Raises:
        BookmarkValidationError: If any field is missing or null.
    """
    for field in BOOKMARK_FIELDS:
        if getattr(data, field) is None:
            raise BookmarkValidationError(f"Missing '{field}' in request body")


def validate_bookmark_patch(patch: BookmarkPatch) -> None:
    """
    Ensure a partial update carries at least one usable field.

    Empty strings, 0 and null count as absent here.

    Raises:
        BookmarkValidationError: If no mutable field has a truthy value.
    """
    if not any(getattr(patch, field) for field in BOOKMARK_FIELDS):
        raise BookmarkValidationError(PATCH_REQUIRED_MESSAGE)
