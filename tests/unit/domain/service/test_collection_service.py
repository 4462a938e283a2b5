"""Unit tests for CollectionService."""

from datetime import datetime, timedelta, timezone

import pytest

from bunko.domain.model import CollectionKind
from bunko.domain.registry import ContentRegistry
from bunko.domain.repository import PostRepository
from bunko.domain.service import CollectionService
from bunko.domain.value import Ordering, PostField, PostQuery
from tests.conftest import make_post, make_registry, sync_post_types
from tests.harness import create_env_fixture

unit_env = create_env_fixture(registry=make_registry())

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
YESTERDAY = NOW - timedelta(days=1)


def make_listing_registry() -> ContentRegistry:
    registry = ContentRegistry()
    registry.declare_post_type("news", per_page=2, order="published_at_asc")
    registry.declare_post_type("notes", path="jottings")
    return registry.freeze()


listing_env = create_env_fixture(registry=make_listing_registry())


async def publish(env, post_type, count, hours_apart=1, **fields):
    """Store ``count`` visible posts, newest first, one hour apart."""
    post_repo = await env.get(PostRepository)
    posts = []
    for i in range(count):
        post = make_post(
            post_type.id,
            title=f"{post_type.name.root} {i}",
            slug=f"{post_type.name.root.replace('_', '-')}-{i}",
            published_at=NOW - timedelta(hours=(i + 1) * hours_apart),
            **fields,
        )
        posts.append(await post_repo.save(post))
    return posts


class TestResolveCollection:
    """Tests for identifier resolution."""

    @pytest.mark.asyncio
    async def test_resolves_post_type_by_name(self, unit_env):
        await sync_post_types(unit_env)
        collection_service = await unit_env.get(CollectionService)

        resolved = await collection_service.resolve_collection("case_study", now=NOW)

        assert resolved.kind == CollectionKind.POST_TYPE
        assert resolved.definition.name.root == "case_study"

    @pytest.mark.asyncio
    async def test_resolves_post_type_by_path(self, unit_env):
        await sync_post_types(unit_env)
        collection_service = await unit_env.get(CollectionService)

        resolved = await collection_service.resolve_collection("case-study", now=NOW)

        assert resolved.definition.name.root == "case_study"

    @pytest.mark.asyncio
    async def test_resolves_collection(self, unit_env):
        await sync_post_types(unit_env)
        collection_service = await unit_env.get(CollectionService)

        resolved = await collection_service.resolve_collection("long-reads", now=NOW)

        assert resolved.kind == CollectionKind.MULTI_TYPE
        assert resolved.definition.name.root == "long_reads"
        assert resolved.query.conditions[-1].field == PostField.WORD_COUNT

    @pytest.mark.asyncio
    async def test_unknown_identifier(self, unit_env):
        collection_service = await unit_env.get(CollectionService)

        assert await collection_service.resolve_collection("nope") is None

    @pytest.mark.asyncio
    async def test_unsynchronised_post_type_resolves_to_nothing(self, unit_env):
        collection_service = await unit_env.get(CollectionService)

        assert await collection_service.resolve_collection("blog") is None


class TestListPosts:
    """Tests for listing one page of a post type or collection."""

    @pytest.mark.asyncio
    async def test_first_page(self, unit_env):
        # Arrange
        post_types = await sync_post_types(unit_env)
        posts = await publish(unit_env, post_types["blog"], 25)
        collection_service = await unit_env.get(CollectionService)

        # Act
        resolved, page = await collection_service.list_posts("blog", page=1, now=NOW)

        # Assert
        assert [p.id for p in page.items] == [p.id for p in posts[:10]]
        assert page.pagination.current_page == 1
        assert page.pagination.per_page == 10
        assert page.pagination.total_count == 25
        assert page.pagination.total_pages == 3
        assert page.pagination.prev_page is None
        assert page.pagination.next_page == 2

    @pytest.mark.asyncio
    async def test_last_page(self, unit_env):
        post_types = await sync_post_types(unit_env)
        posts = await publish(unit_env, post_types["blog"], 25)
        collection_service = await unit_env.get(CollectionService)

        _, page = await collection_service.list_posts("blog", page=3, now=NOW)

        assert [p.id for p in page.items] == [p.id for p in posts[20:]]
        assert page.pagination.prev_page == 2
        assert page.pagination.next_page is None

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        post_types = await sync_post_types(unit_env)
        await publish(unit_env, post_types["blog"], 25)
        collection_service = await unit_env.get(CollectionService)

        _, page = await collection_service.list_posts("blog", page=99, now=NOW)

        assert page.items == []
        assert page.pagination.current_page == 99
        assert page.pagination.total_pages == 3
        assert page.pagination.prev_page == 98
        assert page.pagination.next_page is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("requested", [None, 0, -5])
    async def test_page_below_one_means_first_page(self, unit_env, requested):
        post_types = await sync_post_types(unit_env)
        await publish(unit_env, post_types["blog"], 3)
        collection_service = await unit_env.get(CollectionService)

        _, page = await collection_service.list_posts("blog", page=requested, now=NOW)

        assert page.pagination.current_page == 1
        assert len(page.items) == 3

    @pytest.mark.asyncio
    async def test_empty_post_type(self, unit_env):
        await sync_post_types(unit_env)
        collection_service = await unit_env.get(CollectionService)

        _, page = await collection_service.list_posts("docs", now=NOW)

        assert page.items == []
        assert page.pagination.total_count == 0
        assert page.pagination.total_pages == 0
        assert page.pagination.next_page is None

    @pytest.mark.asyncio
    async def test_hides_drafts_and_scheduled_posts(self, unit_env):
        # Arrange
        post_types = await sync_post_types(unit_env)
        blog = post_types["blog"]
        post_repo = await unit_env.get(PostRepository)
        visible = await post_repo.save(
            make_post(blog.id, title="Live", slug="live", published_at=YESTERDAY)
        )
        await post_repo.save(make_post(blog.id, slug="draft", status="draft"))
        await post_repo.save(
            make_post(blog.id, slug="soon", published_at=NOW + timedelta(days=1))
        )
        collection_service = await unit_env.get(CollectionService)

        # Act
        _, page = await collection_service.list_posts("blog", now=NOW)

        # Assert
        assert [p.id for p in page.items] == [visible.id]

    @pytest.mark.asyncio
    async def test_collection_spans_member_types_only(self, unit_env):
        # Arrange
        post_types = await sync_post_types(unit_env)
        blog_posts = await publish(unit_env, post_types["blog"], 2, hours_apart=2)
        case_studies = await publish(unit_env, post_types["case_study"], 1)
        await publish(unit_env, post_types["docs"], 3)
        collection_service = await unit_env.get(CollectionService)

        # Act
        resolved, page = await collection_service.list_posts("articles", now=NOW)

        # Assert
        assert resolved.kind == CollectionKind.MULTI_TYPE
        assert [p.id for p in page.items] == [
            case_studies[0].id,
            blog_posts[0].id,
            blog_posts[1].id,
        ]

    @pytest.mark.asyncio
    async def test_collection_scope_filters_posts(self, unit_env):
        # Arrange
        post_types = await sync_post_types(unit_env)
        post_repo = await unit_env.get(PostRepository)
        blog_id = post_types["blog"].id

        def post(type_id, slug, word_count, published_at=YESTERDAY):
            return make_post(
                type_id, slug=slug, word_count=word_count, published_at=published_at
            )

        long_blog = await post_repo.save(post(blog_id, "long", 2000))
        await post_repo.save(post(blog_id, "short", 1000))
        await post_repo.save(post(blog_id, "edge", 1500))
        await post_repo.save(post(blog_id, "unknown", None))
        long_study = await post_repo.save(
            post(post_types["case_study"].id, "study", 1501, NOW - timedelta(days=2))
        )
        await post_repo.save(post(post_types["docs"].id, "manual", 5000))
        collection_service = await unit_env.get(CollectionService)

        # Act
        _, page = await collection_service.list_posts("long_reads", now=NOW)

        # Assert
        assert [p.id for p in page.items] == [long_blog.id, long_study.id]

    @pytest.mark.asyncio
    async def test_unknown_collection(self, unit_env):
        collection_service = await unit_env.get(CollectionService)

        assert await collection_service.list_posts("nope") is None


class TestListingOptions:
    """Tests for per-declaration page size and order."""

    @pytest.mark.asyncio
    async def test_declared_per_page_and_order(self, listing_env):
        # Arrange
        post_types = await sync_post_types(listing_env)
        posts = await publish(listing_env, post_types["news"], 5)
        collection_service = await listing_env.get(CollectionService)

        # Act
        _, page = await collection_service.list_posts("news", now=NOW)

        # Assert
        assert page.pagination.per_page == 2
        assert page.pagination.total_pages == 3
        assert [p.id for p in page.items] == [posts[4].id, posts[3].id]

    @pytest.mark.asyncio
    async def test_custom_path(self, listing_env):
        await sync_post_types(listing_env)
        collection_service = await listing_env.get(CollectionService)

        resolved = await collection_service.resolve_collection("jottings")

        assert resolved.definition.name.root == "notes"
        assert await collection_service.resolve_collection("notes-path") is None


class TestApplyOrdering:
    """Tests for named orderings."""

    @pytest.mark.parametrize(
        "key,field,descending",
        [
            ("published_at_desc", PostField.PUBLISHED_AT, True),
            ("published_at_asc", PostField.PUBLISHED_AT, False),
            ("created_at_desc", PostField.CREATED_AT, True),
            ("created_at_asc", PostField.CREATED_AT, False),
        ],
    )
    def test_known_orderings(self, key, field, descending):
        query = CollectionService.apply_ordering(PostQuery(), key)

        assert query.ordering == (Ordering(field=field, descending=descending),)

    @pytest.mark.parametrize("key", ["title_asc", "", None])
    def test_unknown_ordering_keeps_query(self, key):
        query = PostQuery().reorder(PostField.TITLE)

        assert CollectionService.apply_ordering(query, key) is query


class TestFindBySlug:
    """Tests for single post lookup within a collection."""

    @pytest.mark.asyncio
    async def test_finds_visible_post(self, unit_env):
        post_types = await sync_post_types(unit_env)
        posts = await publish(unit_env, post_types["blog"], 2)
        collection_service = await unit_env.get(CollectionService)

        found = await collection_service.find_by_slug("blog", "blog-1", now=NOW)

        assert found.id == posts[1].id

    @pytest.mark.asyncio
    async def test_finds_post_through_collection(self, unit_env):
        post_types = await sync_post_types(unit_env)
        posts = await publish(unit_env, post_types["case_study"], 1)
        collection_service = await unit_env.get(CollectionService)

        found = await collection_service.find_by_slug(
            "articles", "case-study-0", now=NOW
        )

        assert found.id == posts[0].id

    @pytest.mark.asyncio
    async def test_post_outside_collection_not_found(self, unit_env):
        post_types = await sync_post_types(unit_env)
        await publish(unit_env, post_types["docs"], 1)
        collection_service = await unit_env.get(CollectionService)

        assert await collection_service.find_by_slug("articles", "docs-0") is None

    @pytest.mark.asyncio
    async def test_scheduled_post_not_found_until_due(self, unit_env):
        # Arrange
        post_types = await sync_post_types(unit_env)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(
                post_types["blog"].id,
                slug="soon",
                published_at=NOW + timedelta(hours=1),
            )
        )
        collection_service = await unit_env.get(CollectionService)

        # Act
        before = await collection_service.find_by_slug("blog", "soon", now=NOW)
        after = await collection_service.find_by_slug(
            "blog", "soon", now=NOW + timedelta(hours=2)
        )

        # Assert
        assert before is None
        assert after is not None

    @pytest.mark.asyncio
    async def test_draft_not_found(self, unit_env):
        post_types = await sync_post_types(unit_env)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(post_types["blog"].id, slug="wip", status="draft")
        )
        collection_service = await unit_env.get(CollectionService)

        assert await collection_service.find_by_slug("blog", "wip", now=NOW) is None
