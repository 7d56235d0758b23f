"""Topic Services: list all topics.

Invariants:
    - An empty topics table is Success([]), not a failure
"""

import logging

from nc_news.core.errors import DatabaseError
from nc_news.core.outcomes import Outcome, Success, internal_error
from nc_news.core.repository_protocols import NewsRepository

logger = logging.getLogger(__name__)


async def list_topics(repository: NewsRepository) -> Outcome[list[dict]]:
    try:
        topics = await repository.list_topics()
    except DatabaseError as e:
        logger.error(f"Listing topics failed: {e.message}", extra={"error_code": e.code})
        return internal_error()
    logger.debug(f"Retrieved {len(topics)} topics")
    return Success(topics)
