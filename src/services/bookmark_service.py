"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import MAX_BOOKMARK_ID, MIN_BOOKMARK_ID, Bookmark
from schemas.bookmark import BOOKMARK_FIELDS, BookmarkCreate, BookmarkPatch, BookmarkResponse
from schemas.validators import validate_bookmark_patch, validate_new_bookmark
from services import bookmark_store
from services.exceptions import BookmarkNotFoundError
from services.sanitizer import sanitize_bookmark

logger = logging.getLogger(__name__)


async def ensure_bookmark_exists(db: AsyncSession, bookmark_id: int) -> Bookmark:
    """
    Fetch a bookmark or fail.

    Shared precondition for get, update and delete: a missing ID short-circuits
    before any mutation is attempted. IDs outside the primary key range cannot
    exist and are reported as not found without querying.

    Raises:
        BookmarkNotFoundError: If no bookmark has this ID.
    """
    bookmark = None
    if MIN_BOOKMARK_ID <= bookmark_id <= MAX_BOOKMARK_ID:
        bookmark = await bookmark_store.get_bookmark_by_id(db, bookmark_id)
    if bookmark is None:
        logger.info("Bookmark %s not found", bookmark_id)
        raise BookmarkNotFoundError(bookmark_id)
    return bookmark


async def list_bookmarks(db: AsyncSession) -> list[BookmarkResponse]:
    """Get all bookmarks, sanitized, in store order."""
    bookmarks = await bookmark_store.list_bookmarks(db)
    return [sanitize_bookmark(b) for b in bookmarks]


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> BookmarkResponse:
    """Get a single sanitized bookmark by ID."""
    bookmark = await ensure_bookmark_exists(db, bookmark_id)
    return sanitize_bookmark(bookmark)


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> BookmarkResponse:
    """
    Validate and store a new bookmark.

    The text is stored as submitted; the returned record is sanitized.

    Raises:
        BookmarkValidationError: If any of title, url, rating, description is missing.
    """
    validate_new_bookmark(data)
    fields = {field: getattr(data, field) for field in BOOKMARK_FIELDS}
    bookmark = await bookmark_store.insert_bookmark(db, fields)
    await bookmark_store.commit(db)
    logger.info("Created bookmark %s", bookmark.id)
    return sanitize_bookmark(bookmark)


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> None:
    """
    Delete a bookmark.

    Raises:
        BookmarkNotFoundError: If no bookmark has this ID.
    """
    await ensure_bookmark_exists(db, bookmark_id)
    deleted = await bookmark_store.delete_bookmark_by_id(db, bookmark_id)
    await bookmark_store.commit(db)
    logger.info("Deleted bookmark %s (%s row(s))", bookmark_id, deleted)


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    patch: BookmarkPatch,
) -> None:
    """
    Apply a partial update; fields the client did not send keep their stored value.

    Existence is checked before the body, so an unknown ID is reported as not
    found even when the body is also invalid.

    Raises:
        BookmarkNotFoundError: If no bookmark has this ID.
        BookmarkValidationError: If the patch has no usable field.
    """
    await ensure_bookmark_exists(db, bookmark_id)
    validate_bookmark_patch(patch)
    changes = patch.changes()
    updated = await bookmark_store.update_bookmark_by_id(db, bookmark_id, changes)
    await bookmark_store.commit(db)
    logger.info(
        "Updated bookmark %s fields=%s (%s row(s))",
        bookmark_id,
        sorted(changes),
        updated,
    )
