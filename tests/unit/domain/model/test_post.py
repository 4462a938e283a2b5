"""Unit tests for the Post model."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from bunko.domain.model import Post
from bunko.domain.value import PostId, PostTypeId

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def build(**fields) -> Post:
    return Post(id=PostId(uuid4()), post_type_id=PostTypeId(uuid4()), **fields)


class TestPublicationState:
    """Tests for derived publication state."""

    def test_draft_is_neither_visible_nor_scheduled(self):
        post = build(status="draft", published_at=NOW - timedelta(days=1))

        assert not post.is_published
        assert not post.is_visible(NOW)
        assert not post.is_scheduled(NOW)

    def test_published_in_past_is_visible(self):
        post = build(status="published", published_at=NOW - timedelta(days=1))

        assert post.is_visible(NOW)
        assert not post.is_scheduled(NOW)

    def test_published_now_is_visible(self):
        assert build(status="published", published_at=NOW).is_visible(NOW)

    def test_published_in_future_is_scheduled(self):
        post = build(status="published", published_at=NOW + timedelta(minutes=1))

        assert post.is_scheduled(NOW)
        assert not post.is_visible(NOW)

    def test_stored_scheduled_status_is_never_visible(self):
        post = build(status="scheduled", published_at=NOW - timedelta(days=1))

        assert not post.is_visible(NOW)
        assert not post.is_scheduled(NOW)

    def test_naive_datetimes_are_utc(self):
        post = build(status="published", published_at=datetime(2024, 1, 1))

        assert post.published_at.tzinfo == timezone.utc


class TestPresentationHelpers:
    """Tests for formatting helpers."""

    def test_published_date_formats(self):
        post = build(published_at=datetime(2024, 3, 5, 9, 30, tzinfo=timezone.utc))

        assert post.published_date() == "March 05, 2024 09:30"
        assert post.published_date("short") == "05 Mar 09:30"

    def test_published_date_none_when_unpublished(self):
        assert build().published_date() is None

    def test_meta_description_tag_escapes_content(self):
        post = build(meta_description='Tips & "tricks" <here>')

        assert post.meta_description_tag() == (
            '<meta name="description" '
            'content="Tips &amp; &quot;tricks&quot; &lt;here&gt;">'
        )

    @pytest.mark.parametrize("description", [None, ""])
    def test_meta_description_tag_absent(self, description):
        assert build(meta_description=description).meta_description_tag() is None

    def test_to_param_is_slug(self):
        assert build(slug="hello-world").to_param() == "hello-world"

    def test_rejects_negative_word_count(self):
        with pytest.raises(ValueError):
            build(word_count=-1)
