"""
Store adapter for the bookmarks table.

Thin async wrappers around SQLAlchemy. Each function issues a single statement,
flushes so the new state is visible within the request, and re-raises any
database failure as StoreError. The service layer calls `commit` once a
mutation is complete, before the response is built.
"""
import logging
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from services.exceptions import StoreError

logger = logging.getLogger(__name__)


async def list_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """Get all bookmarks in store order (ascending id)."""
    try:
        result = await db.execute(select(Bookmark).order_by(Bookmark.id))
    except SQLAlchemyError as e:
        raise StoreError("Failed to list bookmarks") from e
    return list(result.scalars().all())


async def get_bookmark_by_id(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """Get a bookmark by ID. Returns None if not found."""
    try:
        result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to fetch bookmark {bookmark_id}") from e
    return result.scalar_one_or_none()


async def insert_bookmark(db: AsyncSession, fields: dict[str, Any]) -> Bookmark:
    """
    Insert a bookmark and return the stored row with its assigned ID.

    Note: Does not commit. Caller finishes the unit of work with `commit`.
    """
    bookmark = Bookmark(**fields)
    db.add(bookmark)
    try:
        await db.flush()
        await db.refresh(bookmark)
    except SQLAlchemyError as e:
        raise StoreError("Failed to insert bookmark") from e
    return bookmark


async def delete_bookmark_by_id(db: AsyncSession, bookmark_id: int) -> int:
    """
    Delete a bookmark by ID. Returns the number of rows deleted.

    Note: Does not commit. Caller finishes the unit of work with `commit`.
    """
    try:
        result = await db.execute(delete(Bookmark).where(Bookmark.id == bookmark_id))
        await db.flush()
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to delete bookmark {bookmark_id}") from e
    return result.rowcount


async def update_bookmark_by_id(
    db: AsyncSession,
    bookmark_id: int,
    fields: dict[str, Any],
) -> int:
    """
    Update only the given columns of a bookmark. Returns the number of rows updated.

    An empty `fields` dict is a no-op that reports zero rows.

    Note: Does not commit. Caller finishes the unit of work with `commit`.
    """
    if not fields:
        logger.debug("No columns to update for bookmark %s", bookmark_id)
        return 0
    try:
        result = await db.execute(
            update(Bookmark).where(Bookmark.id == bookmark_id).values(**fields),
        )
        await db.flush()
    except SQLAlchemyError as e:
        raise StoreError(f"Failed to update bookmark {bookmark_id}") from e
    return result.rowcount


async def commit(db: AsyncSession) -> None:
    """
    Commit the current unit of work.

    Runs inside the request so a failed commit surfaces as StoreError (and a
    500) instead of being lost after the response was sent.
    """
    try:
        await db.commit()
    except SQLAlchemyError as e:
        raise StoreError("Failed to commit bookmark changes") from e
