"""Article & Topic Services: orchestration against an in-memory fake repository.

Tests cover:
    - Invalid ids and bodies never reach the repository
    - Out-of-range ids answer NOT_FOUND without a query
    - DatabaseError becomes an INTERNAL failure (HTTP 500, opaque body)
"""

from nc_news.core.domain_types import ErrorKind, MAX_ARTICLE_ID
from nc_news.core.errors import DatabaseError
from nc_news.core.outcomes import Failure, Success
from nc_news.services import articles as articles_service
from nc_news.services import topics as topics_service


async def test_fetch_article_success(fake_repository):
    outcome = await articles_service.fetch_article(fake_repository, "1")
    assert isinstance(outcome, Success)
    assert outcome.payload["article_id"] == 1
    assert fake_repository.calls == [("get_article_by_id", 1)]


async def test_fetch_article_invalid_id_skips_repository(fake_repository):
    outcome = await articles_service.fetch_article(fake_repository, "abc")
    assert outcome == Failure(ErrorKind.INVALID_INPUT, "Invalid id")
    assert fake_repository.calls == []


async def test_fetch_article_out_of_range_skips_repository(fake_repository):
    outcome = await articles_service.fetch_article(
        fake_repository, str(MAX_ARTICLE_ID + 1),
    )
    assert outcome == Failure(ErrorKind.NOT_FOUND, "Article not found")
    assert fake_repository.calls == []


async def test_fetch_article_database_error_is_internal(fake_repository):
    fake_repository.error = DatabaseError("OperationalError", "get_article")
    outcome = await articles_service.fetch_article(fake_repository, "1")
    assert isinstance(outcome, Failure)
    assert outcome.kind is ErrorKind.INTERNAL


async def test_vote_increment_invalid_body_skips_repository(fake_repository):
    outcome = await articles_service.apply_vote_increment(
        fake_repository, "1", {"inc_votes": "1"},
    )
    assert outcome.kind is ErrorKind.BAD_REQUEST
    assert fake_repository.calls == []
    assert fake_repository.articles[1]["votes"] == 100


async def test_vote_increment_success(fake_repository):
    outcome = await articles_service.apply_vote_increment(
        fake_repository, "1", {"inc_votes": -3},
    )
    assert outcome.payload["votes"] == 97
    assert fake_repository.calls == [("increment_article_votes", 1, -3)]


async def test_vote_increment_out_of_range_id_skips_repository(fake_repository):
    outcome = await articles_service.apply_vote_increment(
        fake_repository, str(MAX_ARTICLE_ID + 1), {"inc_votes": 1},
    )
    assert outcome == Failure(ErrorKind.NOT_FOUND, "Article not found")
    assert fake_repository.calls == []


async def test_vote_increment_unknown_article_invalid_body(fake_repository):
    outcome = await articles_service.apply_vote_increment(fake_repository, "5", {})
    assert outcome == Failure(ErrorKind.BAD_REQUEST, "Bad request - invalid input")
    assert fake_repository.calls == []


async def test_vote_increment_unknown_article(fake_repository):
    outcome = await articles_service.apply_vote_increment(
        fake_repository, "5", {"inc_votes": 1},
    )
    assert outcome == Failure(ErrorKind.NOT_FOUND, "Article not found")


async def test_list_topics_database_error_is_internal(fake_repository):
    fake_repository.error = DatabaseError("OperationalError", "list_topics")
    outcome = await topics_service.list_topics(fake_repository)
    assert outcome.kind is ErrorKind.INTERNAL


async def test_list_topics_empty(fake_repository):
    fake_repository.topics = []
    assert await topics_service.list_topics(fake_repository) == Success([])


# ─── Through the HTTP layer ──────────────────────────────────────

async def test_internal_failure_maps_to_500_plain_text(fake_client, fake_repository):
    fake_repository.error = DatabaseError("OperationalError", "get_article")
    res = await fake_client.get("/api/articles/1")
    assert res.status_code == 500
    assert res.text == "Internal server error"


async def test_topics_internal_failure(fake_client, fake_repository):
    fake_repository.error = DatabaseError("OperationalError", "list_topics")
    res = await fake_client.get("/api/topics")
    assert res.status_code == 500
    assert res.text == "Internal server error"


async def test_fake_repository_patch_round_trip(fake_client):
    res = await fake_client.patch("/api/articles/1", json={"inc_votes": 10})
    assert res.status_code == 200
    assert res.json()["articleObj"]["votes"] == 110
    assert res.json()["articleObj"]["created_at"] == "2020-07-09T20:11:00.000Z"
