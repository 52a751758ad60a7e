"""Shared fixtures for API tests."""
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from models.bookmark import Bookmark


def make_bookmarks_array() -> list[dict[str, Any]]:
    """Three plain bookmarks with fixed IDs."""
    return [
        {
            "id": 1,
            "title": "title 1",
            "url": "www.url1.com",
            "description": "description 1",
            "rating": 1,
        },
        {
            "id": 2,
            "title": "title 2",
            "url": "www.url2.com",
            "description": "description 2",
            "rating": 2,
        },
        {
            "id": 3,
            "title": "title 3",
            "url": "www.url3.com",
            "description": "description 3",
            "rating": 3,
        },
    ]


def make_malicious_bookmark() -> dict[str, Any]:
    """A bookmark carrying script and event-handler injection attempts."""
    return {
        "id": 911,
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "url": "https://www.hackers.com",
        "description": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
        "rating": 1,
    }


async def insert_bookmarks(
    session_factory: async_sessionmaker[AsyncSession],
    rows: list[dict[str, Any]],
) -> None:
    """Insert rows directly into the bookmarks table and commit."""
    async with session_factory() as session:
        session.add_all([Bookmark(**row) for row in rows])
        await session.commit()


@pytest.fixture
def test_bookmarks() -> list[dict[str, Any]]:
    """The plain bookmark fixtures."""
    return make_bookmarks_array()


@pytest.fixture
async def seeded_bookmarks(
    session_factory: async_sessionmaker[AsyncSession],
    test_bookmarks: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Insert the plain bookmark fixtures and return them."""
    await insert_bookmarks(session_factory, test_bookmarks)
    return test_bookmarks
