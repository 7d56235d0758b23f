"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell, dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - "No row" is None, never an exception; failures raise DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, services await them around the
      pure validation and mapping in core/
"""

from typing import Protocol

from nc_news.core.domain_types import ArticleId, VoteDelta


class NewsRepository(Protocol):
    """Contract for topic and article persistence, implemented by shell."""
    async def list_topics(self) -> list[dict]: ...
    async def get_article_by_id(self, article_id: ArticleId) -> dict | None: ...
    async def increment_article_votes(
        self, article_id: ArticleId, delta: VoteDelta,
    ) -> dict | None: ...
