"""Article Services: fetch one article, apply a vote delta.

Invariants:
    - Id validated first; invalid id never reaches the repository
    - PATCH body validated after the id and before any write
    - Repository "no row" (None) becomes NOT_FOUND "Article not found"
    - DatabaseError becomes INTERNAL; the cause is logged, never returned

Design Decisions:
    - Ids above the column maximum short-circuit to NOT_FOUND: such a row cannot
      exist, and the driver would otherwise reject the bind parameter
"""

import logging
from typing import Any

from nc_news.core.errors import DatabaseError
from nc_news.core.outcomes import (
    Failure, Outcome, Success, internal_error, not_found,
)
from nc_news.core.repository_protocols import NewsRepository
from nc_news.core.validation import (
    is_storable_id, parse_article_id, parse_vote_increment,
)

logger = logging.getLogger(__name__)

ARTICLE = "Article"


async def fetch_article(
    repository: NewsRepository, raw_article_id: str,
) -> Outcome[dict]:
    """GET /api/articles/{article_id}."""
    parsed = parse_article_id(raw_article_id)
    if isinstance(parsed, Failure):
        return parsed
    article_id = parsed.payload
    if not is_storable_id(article_id):
        return not_found(ARTICLE)

    try:
        article = await repository.get_article_by_id(article_id)
    except DatabaseError as e:
        logger.error(
            f"Fetching article failed: {e.message}",
            extra={"article_id": article_id, "error_code": e.code},
        )
        return internal_error()

    if article is None:
        logger.info(f"Article {article_id} not found", extra={"article_id": article_id})
        return not_found(ARTICLE)
    return Success(article)


async def apply_vote_increment(
    repository: NewsRepository, raw_article_id: str, payload: Any,
) -> Outcome[dict]:
    """PATCH /api/articles/{article_id}. `payload` is the decoded JSON body (None if undecodable)."""
    parsed = parse_article_id(raw_article_id)
    if isinstance(parsed, Failure):
        return parsed
    article_id = parsed.payload

    delta = parse_vote_increment(payload)
    if isinstance(delta, Failure):
        logger.info(
            f"Rejected vote body for article {article_id}",
            extra={"article_id": article_id},
        )
        return delta

    if not is_storable_id(article_id):
        return not_found(ARTICLE)

    try:
        article = await repository.increment_article_votes(article_id, delta.payload)
    except DatabaseError as e:
        logger.error(
            f"Updating votes failed: {e.message}",
            extra={"article_id": article_id, "error_code": e.code},
        )
        return internal_error()

    if article is None:
        return not_found(ARTICLE)
    return Success(article)
