"""Topic Schemas: list response for GET /api/topics."""

from pydantic import BaseModel


class TopicResponse(BaseModel):
    slug: str
    description: str


class TopicListResponse(BaseModel):
    results: list[TopicResponse]
