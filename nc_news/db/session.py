"""Async Engine Factory: engines for direct usage outside FastAPI.

Invariants:
    - Uses the same URL handling as the app (Settings.database_url)
    - Meant for scripts (seeding), migrations, and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: no pool sizing, no health checks,
      the caller disposes the engine when done
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_engine(database_url: str) -> AsyncEngine:
    """Create an async engine for the given database URL."""
    return create_async_engine(database_url, echo=False)
