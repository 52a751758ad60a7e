"""
Outbound sanitization for user-supplied bookmark text.

Bookmarks are stored exactly as submitted. Every record leaving the API passes
through `sanitize_bookmark`, which neutralizes markup in the free-text fields:
disallowed tags (e.g. <script>) are escaped so they render as inert text,
event-handler attributes (onerror, onclick, ...) are dropped, and harmless
formatting tags such as <strong> survive.
"""
from bleach.sanitizer import Cleaner

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkResponse


ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "em", "i", "img",
    "li", "ol", "p", "pre", "strong", "u", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_CLEANER = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def sanitize_text(value: str) -> str:
    """Escape disallowed markup and drop unsafe attributes from `value`."""
    return _CLEANER.clean(value)


def sanitize_bookmark(bookmark: Bookmark) -> BookmarkResponse:
    """
    Build the outbound representation of a bookmark.

    `id` and `rating` are copied unchanged; `title`, `url` and `description`
    are sanitized. The ORM object itself is not modified, so nothing sanitized
    is ever flushed back to the database.
    """
    return BookmarkResponse(
        id=bookmark.id,
        title=sanitize_text(bookmark.title),
        url=sanitize_text(bookmark.url),
        rating=bookmark.rating,
        description=sanitize_text(bookmark.description),
    )
