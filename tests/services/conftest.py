"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database, reseeded with TEST_DATA
    - get_db dependency overridden to use the test DB session
    - db_manager patched for the readiness probe, which bypasses get_db
    - fake_repository replaces get_news_repository for failure-path tests

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import nc_news.infrastructure.database as db_module
from nc_news.api.dependencies import get_news_repository
from nc_news.db.data.test_data import TEST_DATA
from nc_news.db.seed import seed
from nc_news.infrastructure.database import DatabaseSessionManager, get_db
from nc_news.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    await seed(engine, TEST_DATA)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


class FakeNewsRepository:
    """In-memory NewsRepository. Set `error` to make every call raise it."""

    def __init__(self, topics=None, articles=None):
        self.topics = list(topics or [])
        self.articles = {a["article_id"]: dict(a) for a in articles or []}
        self.error: Exception | None = None
        self.calls: list[tuple] = []

    async def list_topics(self):
        self.calls.append(("list_topics",))
        if self.error:
            raise self.error
        return list(self.topics)

    async def get_article_by_id(self, article_id):
        self.calls.append(("get_article_by_id", article_id))
        if self.error:
            raise self.error
        article = self.articles.get(article_id)
        return dict(article) if article else None

    async def increment_article_votes(self, article_id, delta):
        self.calls.append(("increment_article_votes", article_id, delta))
        if self.error:
            raise self.error
        article = self.articles.get(article_id)
        if article is None:
            return None
        article["votes"] += delta
        return dict(article)


@pytest.fixture
def fake_repository():
    return FakeNewsRepository(
        topics=[{"slug": "cats", "description": "Not dogs"}],
        articles=[{
            "author": "butter_bridge",
            "title": "Living in the shadow of a great man",
            "article_id": 1,
            "body": "I find this existence challenging",
            "topic": "mitch",
            "created_at": datetime(2020, 7, 9, 20, 11, tzinfo=timezone.utc),
            "votes": 100,
        }],
    )


@pytest.fixture
async def fake_client(fake_repository):
    """Test client whose routes see fake_repository instead of the database."""
    app.dependency_overrides[get_news_repository] = lambda: fake_repository
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
