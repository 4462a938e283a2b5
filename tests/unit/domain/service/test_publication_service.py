"""Unit tests for PublicationService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from bunko.config import ContentSettings
from bunko.domain.service import PublicationService
from bunko.domain.value import Operator, PostField, PostTypeId
from bunko.persistence.repository.inmemory.store import select_posts
from tests.conftest import make_post

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def publication_service():
    return PublicationService(ContentSettings())


@pytest.fixture
def post_type_id():
    return PostTypeId(uuid4())


class TestStatus:
    """Tests for status validation."""

    @pytest.mark.parametrize("status", ["draft", "published", "scheduled"])
    def test_accepts_configured_statuses(self, publication_service, status):
        assert publication_service.is_valid_status(status)

    def test_rejects_unknown_status(self, publication_service):
        assert not publication_service.is_valid_status("archived")

    def test_statuses_come_from_settings(self):
        service = PublicationService(ContentSettings(valid_statuses=["draft"]))

        assert not service.is_valid_status("published")


class TestAssignPublishedAt:
    """Tests for published_at stamping."""

    def test_stamps_published_post_without_date(
        self, publication_service, post_type_id
    ):
        post = make_post(post_type_id, published_days_ago=None)

        result = publication_service.assign_published_at(post, NOW)

        assert result.published_at == NOW

    def test_keeps_future_date(self, publication_service, post_type_id):
        future = NOW + timedelta(days=3)
        post = make_post(post_type_id, published_at=future)

        result = publication_service.assign_published_at(post, NOW)

        assert result.published_at == future

    def test_leaves_drafts_alone(self, publication_service, post_type_id):
        post = make_post(post_type_id, status="draft")

        result = publication_service.assign_published_at(post, NOW)

        assert result.published_at is None

    def test_stored_scheduled_status_is_not_stamped(
        self, publication_service, post_type_id
    ):
        post = make_post(post_type_id, status="scheduled")

        result = publication_service.assign_published_at(post, NOW)

        assert result.published_at is None


class TestVisibilityQueries:
    """Tests for the published, draft and scheduled views."""

    @pytest.fixture
    def posts(self, post_type_id):
        return {
            "past": make_post(
                post_type_id, title="Past", published_at=NOW - timedelta(days=1)
            ),
            "older": make_post(
                post_type_id, title="Older", published_at=NOW - timedelta(days=5)
            ),
            "boundary": make_post(post_type_id, title="Boundary", published_at=NOW),
            "future": make_post(
                post_type_id, title="Future", published_at=NOW + timedelta(days=1)
            ),
            "later": make_post(
                post_type_id, title="Later", published_at=NOW + timedelta(days=9)
            ),
            "draft": make_post(post_type_id, title="Draft", status="draft"),
            "scheduled_status": make_post(
                post_type_id,
                title="Stored as scheduled",
                status="scheduled",
                published_at=NOW - timedelta(days=1),
            ),
        }

    def test_published_view(self, publication_service, posts):
        query = publication_service.published(now=NOW)

        titles = [p.title for p in select_posts(list(posts.values()), query)]

        assert titles == ["Boundary", "Past", "Older"]

    def test_scheduled_view(self, publication_service, posts):
        query = publication_service.scheduled(now=NOW)

        titles = [p.title for p in select_posts(list(posts.values()), query)]

        assert titles == ["Future", "Later"]

    def test_drafts_view(self, publication_service, posts):
        query = publication_service.drafts()

        titles = [p.title for p in select_posts(list(posts.values()), query)]

        assert titles == ["Draft"]

    def test_published_narrows_an_existing_query(self, publication_service):
        type_id = PostTypeId(uuid4())
        base = publication_service.drafts().where(PostField.POST_TYPE_ID, "eq", type_id)

        query = publication_service.published(base, now=NOW)

        assert query.conditions[1].value == type_id
        assert query.conditions[-1].op == Operator.LE
        assert query.ordering[0].field == PostField.PUBLISHED_AT
        assert query.ordering[0].descending
