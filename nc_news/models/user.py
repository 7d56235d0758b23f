"""User ORM: article authors, keyed by username."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nc_news.db.base import Base


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
