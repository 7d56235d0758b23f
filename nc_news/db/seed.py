"""Seeding: rebuild the schema and load a fixture data set.

Invariants:
    - seed() is destructive: drops every table in Base.metadata first
    - Rows inserted in foreign-key order: topics, users, articles
    - article_id values come from the database sequence (1..N in data order)

Usage:
    python -m nc_news.db.seed            # seeds DATABASE_URL with the test data set
"""

import asyncio
import logging

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine

from nc_news.config import get_settings
from nc_news.db.base import Base
from nc_news.db.data.test_data import TEST_DATA, SeedData
from nc_news.db.session import create_engine
from nc_news.infrastructure.observability import setup_logging
from nc_news.models import Article, Topic, User

logger = logging.getLogger(__name__)


async def seed(engine: AsyncEngine, data: SeedData) -> None:
    """Drop, recreate and populate all tables in one transaction."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
        if data["topics"]:
            await conn.execute(insert(Topic), data["topics"])
        if data["users"]:
            await conn.execute(insert(User), data["users"])
        if data["articles"]:
            await conn.execute(insert(Article), data["articles"])
    logger.info(
        f"Seeded {len(data['topics'])} topics, {len(data['users'])} users, "
        f"{len(data['articles'])} articles",
    )


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    engine = create_engine(settings.database_url)
    try:
        await seed(engine, TEST_DATA)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
