"""Topic Routes: GET /api/topics.

Invariants:
    - Response body is {"results": [Topic, ...]}
"""

from fastapi import APIRouter, Depends

from nc_news.api.dependencies import get_news_repository
from nc_news.core.outcomes import unwrap
from nc_news.core.repository_protocols import NewsRepository
from nc_news.schemas.topic import TopicListResponse
from nc_news.services import topics as topics_service

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=TopicListResponse)
async def get_topics(
    repository: NewsRepository = Depends(get_news_repository),
):
    """List every topic."""
    topics = unwrap(await topics_service.list_topics(repository))
    return {"results": topics}
