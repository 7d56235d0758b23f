"""Article ORM: the only entity this API mutates.

Invariants:
    - article_id is a serial integer primary key (always positive)
    - votes is non-nullable, default 0, changed only by a relative UPDATE
    - author references users.username, topic references topics.slug

Design Decisions:
    - Column names match the public JSON keys, so rows serialize without renames
    - created_at stored with timezone; API renders it as UTC
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nc_news.db.base import Base


class Article(Base):
    __tablename__ = "articles"

    article_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    topic: Mapped[str] = mapped_column(
        String(100), ForeignKey("topics.slug"), nullable=False,
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
