"""Unit tests for UpdatePostUseCase."""

from uuid import uuid4

import pytest

from bunko.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from bunko.domain.error import NotFoundError, ValidationError
from tests.conftest import make_registry, sync_post_types
from tests.harness import create_env_fixture

unit_env = create_env_fixture(registry=make_registry())


async def create(env, **fields):
    fields.setdefault("post_type", "blog")
    fields.setdefault("title", "Original Title")
    use_case = await env.get(CreatePostUseCase)
    return await use_case.execute(CreatePostRequest(**fields))


class TestUpdatePost:
    """Tests for partial updates."""

    @pytest.mark.asyncio
    async def test_only_set_fields_change(self, unit_env):
        # Arrange
        await sync_post_types(unit_env)
        created = await create(unit_env, content="one two", title_tag="Tag")
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act
        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, title="New Title")
        )

        # Assert
        assert response.title == "New Title"
        assert response.slug == "original-title"
        assert response.content == "one two"
        assert response.title_tag == "Tag"
        assert response.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_null_slug_regenerates_from_title(self, unit_env):
        await sync_post_types(unit_env)
        created = await create(unit_env)
        use_case = await unit_env.get(UpdatePostUseCase)

        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, title="Renamed", slug=None)
        )

        assert response.slug == "renamed"

    @pytest.mark.asyncio
    async def test_content_change_recounts_words(self, unit_env):
        await sync_post_types(unit_env)
        created = await create(unit_env, content="one two")
        use_case = await unit_env.get(UpdatePostUseCase)

        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, content="one two three")
        )

        assert created.word_count == 2
        assert response.word_count == 3

    @pytest.mark.asyncio
    async def test_manual_word_count_kept_when_content_unchanged(self, unit_env):
        await sync_post_types(unit_env)
        created = await create(unit_env, content="one two")
        use_case = await unit_env.get(UpdatePostUseCase)

        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, word_count=500)
        )

        assert response.word_count == 500
        assert response.reading_time == 2

    @pytest.mark.asyncio
    async def test_publishing_a_draft(self, unit_env):
        await sync_post_types(unit_env)
        created = await create(unit_env)
        use_case = await unit_env.get(UpdatePostUseCase)

        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, status="published")
        )

        assert response.status == "published"
        assert response.published_at is not None

    @pytest.mark.asyncio
    async def test_null_title_is_ignored(self, unit_env):
        await sync_post_types(unit_env)
        created = await create(unit_env)
        use_case = await unit_env.get(UpdatePostUseCase)

        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, title=None)
        )

        assert response.title == "Original Title"

    @pytest.mark.asyncio
    async def test_taken_slug(self, unit_env):
        await sync_post_types(unit_env)
        await create(unit_env, title="First")
        second = await create(unit_env, title="Second")
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                UpdatePostRequest(post_id=second.post_id, slug="first")
            )

        assert exc_info.value.errors == {"slug": ["has already been taken"]}

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(UpdatePostRequest(post_id=str(uuid4()), title="X"))

    @pytest.mark.asyncio
    async def test_blank_content_zeroes_word_count(self, unit_env):
        await sync_post_types(unit_env)
        created = await create(unit_env, content="one two three")
        use_case = await unit_env.get(UpdatePostUseCase)

        response = await use_case.execute(
            UpdatePostRequest(post_id=created.post_id, content="")
        )

        assert response.word_count == 0
        assert response.reading_time is None
