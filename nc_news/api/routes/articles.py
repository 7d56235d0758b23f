"""Article Routes: GET and PATCH /api/articles/{article_id}.

Invariants:
    - article_id declared as str: the service owns id validation, so a bad id
      yields 400 "Invalid id" instead of the framework's 422
    - PATCH body read raw: an undecodable body is validated like a missing field
    - Success responses wrap the article under "articleObj"

Design Decisions:
    - Routes never branch on failure kinds: unwrap() raises, error handlers map
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from nc_news.api.dependencies import get_news_repository
from nc_news.core.outcomes import unwrap
from nc_news.core.repository_protocols import NewsRepository
from nc_news.schemas.article import ArticleEnvelope, ArticleVotePatch
from nc_news.services import articles as articles_service

router = APIRouter(prefix="/api/articles", tags=["articles"])


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("/{article_id}", response_model=ArticleEnvelope)
async def get_article(
    article_id: str,
    repository: NewsRepository = Depends(get_news_repository),
):
    """Fetch one article by id."""
    article = unwrap(
        await articles_service.fetch_article(repository, article_id),
    )
    return {"articleObj": article}


@router.patch(
    "/{article_id}",
    response_model=ArticleEnvelope,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": ArticleVotePatch.model_json_schema(),
                },
            },
        },
    },
)
async def patch_article_votes(
    article_id: str,
    request: Request,
    repository: NewsRepository = Depends(get_news_repository),
):
    """Add inc_votes (may be negative) to an article's votes."""
    payload = await _read_json_body(request)
    article = unwrap(
        await articles_service.apply_vote_increment(repository, article_id, payload),
    )
    return {"articleObj": article}
