"""Topic ORM: read-only category that articles belong to.

Invariants:
    - slug is the natural primary key (referenced by articles.topic)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nc_news.db.base import Base


class Topic(Base):
    __tablename__ = "topics"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
