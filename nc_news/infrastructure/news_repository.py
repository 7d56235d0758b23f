"""News Repository: SQLAlchemy implementation of the NewsRepository Protocol.

Invariants:
    - Returns plain dicts keyed by column name, or None when no row matches
    - Vote increment is ONE UPDATE ... RETURNING statement, committed immediately
    - Every SQLAlchemyError is re-raised as DatabaseError (session rolled back)

Design Decisions:
    - Column-level select/returning over ORM entities: rows leave the session
      as detached dicts, nothing lazy-loads after the request ends
    - Relative SET votes = votes + :delta: concurrent PATCHes on one id
      never lose an update (row lock held by the UPDATE itself)
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nc_news.core.domain_types import ArticleId, VoteDelta
from nc_news.core.errors import DatabaseError
from nc_news.models.article import Article
from nc_news.models.topic import Topic

logger = logging.getLogger(__name__)

ARTICLE_COLUMNS = (
    Article.author,
    Article.title,
    Article.article_id,
    Article.body,
    Article.topic,
    Article.created_at,
    Article.votes,
)


class SqlNewsRepository:
    """Topic/article persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_topics(self) -> list[dict]:
        try:
            result = await self.db.execute(
                select(Topic.slug, Topic.description).order_by(Topic.slug),
            )
        except SQLAlchemyError as e:
            await self._rollback(e, "list_topics")
            raise DatabaseError(type(e).__name__, "list_topics") from e
        return [dict(row) for row in result.mappings().all()]

    async def get_article_by_id(self, article_id: ArticleId) -> dict | None:
        try:
            result = await self.db.execute(
                select(*ARTICLE_COLUMNS).where(Article.article_id == article_id),
            )
        except SQLAlchemyError as e:
            await self._rollback(e, "get_article")
            raise DatabaseError(type(e).__name__, "get_article") from e
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def increment_article_votes(
        self, article_id: ArticleId, delta: VoteDelta,
    ) -> dict | None:
        try:
            result = await self.db.execute(
                update(Article)
                .where(Article.article_id == article_id)
                .values(votes=Article.votes + delta)
                .returning(*ARTICLE_COLUMNS),
            )
            row = result.mappings().first()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback(e, "increment_votes")
            raise DatabaseError(type(e).__name__, "increment_votes") from e
        if row is None:
            return None
        logger.info(
            f"Article {article_id} votes changed by {delta}",
            extra={"article_id": article_id},
        )
        return dict(row)

    async def _rollback(self, exc: SQLAlchemyError, operation: str) -> None:
        await self.db.rollback()
        logger.error(f"DB {operation} failed: {exc}")
