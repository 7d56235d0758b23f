"""Request Dependencies: wires a per-request repository from the DB session.

Invariants:
    - One SqlNewsRepository per request, bound to that request's AsyncSession
    - Routes depend on the NewsRepository Protocol, never on SQLAlchemy

Design Decisions:
    - Separate dependency over constructing in routes: tests override get_db
      (real SQLite) or get_news_repository (in-memory fake) independently
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.core.repository_protocols import NewsRepository
from nc_news.infrastructure.database import get_db
from nc_news.infrastructure.news_repository import SqlNewsRepository


async def get_news_repository(
    db: AsyncSession = Depends(get_db),
) -> NewsRepository:
    return SqlNewsRepository(db)
