"""Bookmark model for storing bookmarks."""
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

# Range of the INTEGER primary key column
MIN_BOOKMARK_ID = -(2**31)
MAX_BOOKMARK_ID = 2**31 - 1


class Bookmark(Base):
    """
    Bookmark model - a titled URL with a rating and description.

    Text columns hold exactly what the client sent. Markup is neutralized on the
    way out (see services.sanitizer), never before storage.
    """

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Bookmark id={self.id} title={self.title!r}>"
