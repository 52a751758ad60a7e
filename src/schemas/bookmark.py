"""Pydantic schemas for bookmark endpoints."""
from typing import Any

from pydantic import BaseModel, ConfigDict

# Order matters: validation reports the first missing field in this order.
BOOKMARK_FIELDS: tuple[str, ...] = ("title", "url", "rating", "description")


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Every field is optional at parse time so that a missing field reaches
    `validate_new_bookmark` and is reported by name, rather than surfacing as a
    generic parser error.
    """

    title: str | None = None
    url: str | None = None
    rating: int | None = None
    description: str | None = None


class BookmarkPatch(BaseModel):
    """
    Schema for a partial bookmark update.

    Presence is tracked per field through `model_fields_set`, so a field that
    was omitted can be told apart from one explicitly sent as null. Keys other
    than the four mutable fields are ignored.
    """

    title: str | None = None
    url: str | None = None
    rating: int | None = None
    description: str | None = None

    def is_present(self, field: str) -> bool:
        """Return True if the client sent `field` at all (even as null)."""
        return field in self.model_fields_set

    def changes(self) -> dict[str, Any]:
        """
        Return the fields to write to the store.

        Only fields the client sent are included. Explicit nulls are dropped
        because every bookmark column is non-nullable.
        """
        return {
            field: getattr(self, field)
            for field in BOOKMARK_FIELDS
            if self.is_present(field) and getattr(self, field) is not None
        }


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses. Text fields are always sanitized."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    rating: int
    description: str
