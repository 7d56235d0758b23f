"""Article Schemas: PATCH body and response envelopes.

Invariants:
    - ArticleVotePatch.inc_votes is an integer within the 32-bit range of the votes
      column; an integral float (10.0) counts, bool, str, null and 2.5 do not
    - ArticleResponse field order is the wire order: author, title, article_id,
      body, topic, created_at, votes
    - created_at serialized as UTC ISO-8601 with milliseconds and a Z suffix

Design Decisions:
    - Envelope key "articleObj" is an alias: existing clients read that key
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_serializer, field_validator


class ArticleVotePatch(BaseModel):
    """PATCH /api/articles/{id} body. Unknown keys are ignored."""
    inc_votes: int = Field(strict=True, ge=-2_147_483_648, le=2_147_483_647)

    @field_validator("inc_votes", mode="before")
    @classmethod
    def integral_float_to_int(cls, value):
        # JSON has one number type: 10.0 is the integer 10
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class ArticleResponse(BaseModel):
    """Public article shape."""
    author: str
    title: str
    article_id: int
    body: str
    topic: str
    created_at: datetime
    votes: int

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        # SQLite hands back naive datetimes; stored values are always UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ArticleEnvelope(BaseModel):
    article: ArticleResponse = Field(alias="articleObj")
