"""Input Validation: pure parsing of path parameters and PATCH bodies.

Invariants:
    - Article ids are ASCII digits only, value > 0 ("0", "-1", "1.5", " 1" rejected)
    - inc_votes must be a JSON integer (10.0 included): bool, 2.5, str and null are rejected
    - Validation never touches the database

Design Decisions:
    - Pydantic strict mode for the body: same model documents the OpenAPI schema
      and enforces the type, so there is one definition of a valid body
    - Out-of-range ids are valid input, reported separately by is_storable_id()
      so the service can answer NOT_FOUND without a query
"""

import re
from typing import Any

from pydantic import ValidationError

from nc_news.core.domain_types import ArticleId, MAX_ARTICLE_ID, VoteDelta
from nc_news.core.outcomes import Outcome, Success, bad_request, invalid_id
from nc_news.schemas.article import ArticleVotePatch

_DIGITS = re.compile(r"[0-9]+")


def parse_article_id(raw: str) -> Outcome[ArticleId]:
    """Parse a path segment into a positive ArticleId."""
    if not isinstance(raw, str) or not _DIGITS.fullmatch(raw):
        return invalid_id()
    if len(raw.lstrip("0")) > len(str(MAX_ARTICLE_ID)):
        # Too long to be a stored id; int() would also hit the digit limit
        return Success(ArticleId(MAX_ARTICLE_ID + 1))
    value = int(raw)
    if value <= 0:
        return invalid_id()
    return Success(ArticleId(value))


def is_storable_id(article_id: ArticleId) -> bool:
    """True if the id fits the articles.article_id column."""
    return article_id <= MAX_ARTICLE_ID


def parse_vote_increment(payload: Any) -> Outcome[VoteDelta]:
    """Validate a decoded PATCH body, returning the vote delta."""
    if not isinstance(payload, dict):
        return bad_request()
    try:
        patch = ArticleVotePatch.model_validate(payload)
    except ValidationError:
        return bad_request()
    return Success(VoteDelta(patch.inc_votes))
