"""Seed script to populate a local dev database with sample bookmarks.

Usage:
    PYTHONPATH=src python scripts/seed_data.py populate
    PYTHONPATH=src python scripts/seed_data.py populate --force
    PYTHONPATH=src python scripts/seed_data.py clear
"""

import argparse
import asyncio

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import get_settings
from models import Bookmark
from services import bookmark_store

BOOKMARKS = [
    {
        'title': 'Python Official Documentation',
        'url': 'https://docs.python.org/3/',
        'rating': 5,
        'description': 'Comprehensive reference for the Python programming language.',
    },
    {
        'title': 'MDN Web Docs - JavaScript',
        'url': 'https://developer.mozilla.org/en-US/docs/Web/JavaScript',
        'rating': 5,
        'description': 'The definitive resource for <strong>JavaScript</strong> and web APIs.',
    },
    {
        'title': 'FastAPI',
        'url': 'https://fastapi.tiangolo.com/',
        'rating': 4,
        'description': 'Modern, fast web framework for building APIs with Python type hints.',
    },
    {
        'title': 'SQLAlchemy 2.0 Tutorial',
        'url': 'https://docs.sqlalchemy.org/en/20/tutorial/',
        'rating': 4,
        'description': 'Unified tutorial covering Core and ORM usage.',
    },
    {
        'title': 'OWASP XSS Prevention Cheat Sheet',
        'url': 'https://cheatsheetseries.owasp.org/cheatsheets/Cross_Site_Scripting_Prevention_Cheat_Sheet.html',
        'rating': 3,
        'description': 'Why <script>alert("xss")</script> should never reach a browser as markup.',
    },
]


async def count_bookmarks(session: AsyncSession) -> int:
    """Return the number of rows in the bookmarks table."""
    return (await session.execute(select(func.count()).select_from(Bookmark))).scalar() or 0


async def clear_data(session: AsyncSession) -> None:
    """Delete every bookmark."""
    bm_count = await count_bookmarks(session)
    await session.execute(delete(Bookmark))
    await session.flush()
    print(f'  Deleted {bm_count} bookmarks')
    print('Clear complete.')


async def create_bookmarks(session: AsyncSession) -> None:
    """Insert the sample bookmarks."""
    for data in BOOKMARKS:
        bookmark = await bookmark_store.insert_bookmark(session, data)
        print(f'  Created bookmark {bookmark.id}: {bookmark.title}')


async def populate(force: bool = False) -> None:
    """Populate the database with seed data."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            existing = await count_bookmarks(session)
            if existing > 0:
                if force:
                    print('Existing data found, clearing first (--force)...')
                    await clear_data(session)
                else:
                    print(
                        f'Data already exists ({existing} bookmarks). '
                        f'Use --force to clear and re-seed.'
                    )
                    return

            print('Populating seed data...')
            await create_bookmarks(session)
            await session.commit()
            print('Seed data created successfully.')
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


async def clear() -> None:
    """Clear all bookmarks."""
    settings = get_settings()
    engine = create_async_engine(settings.database_url, echo=False)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            await clear_data(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await engine.dispose()


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    if not settings.dev_mode:
        print(
            "ERROR: Seed script requires DEV_MODE=true.\n"
            "This script modifies data directly and must only run against a local dev database."
        )
        raise SystemExit(1)

    parser = argparse.ArgumentParser(description='Seed the dev database with sample bookmarks.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    populate_parser = subparsers.add_parser('populate', help='Populate database with sample bookmarks')
    populate_parser.add_argument(
        '--force', action='store_true',
        help='Clear existing data before populating',
    )

    subparsers.add_parser('clear', help='Remove all bookmarks')

    args = parser.parse_args()

    if args.command == 'populate':
        asyncio.run(populate(force=args.force))
    elif args.command == 'clear':
        asyncio.run(clear())


if __name__ == '__main__':
    main()
