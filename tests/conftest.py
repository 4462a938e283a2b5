"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import uuid4

import logfire
from dishka import AsyncContainer

from bunko.domain.model import Post, PostType
from bunko.domain.registry import ContentRegistry
from bunko.domain.service import PostTypeService
from bunko.domain.value import CollectionScope, PostId, PostTypeId, utc_now

# Keep telemetry local; services log through logfire unconditionally
logfire.configure(send_to_logfire=False, console=False)


def make_registry() -> ContentRegistry:
    """Registry used across tests.

    Post types blog, docs and case_study; collection ``articles`` spans blog
    and case_study, and ``long_reads`` narrows the same types to posts over
    1500 words.
    """
    registry = ContentRegistry()
    registry.declare_post_type("blog")
    registry.declare_post_type("docs", title="Documentation")
    registry.declare_post_type("case_study")
    registry.declare_collection("articles", post_types=["blog", "case_study"])
    registry.declare_collection(
        "long_reads",
        post_types=["blog", "case_study"],
        scope=CollectionScope.where("long", "word_count", "gt", 1500),
    )
    return registry.freeze()


async def sync_post_types(env: AsyncContainer) -> dict[str, PostType]:
    """Create PostType rows for the registry and index them by name."""
    post_type_service = await env.get(PostTypeService)
    post_types = await post_type_service.sync_from_registry()
    return {pt.name.root: pt for pt in post_types}


def make_post(
    post_type_id: PostTypeId,
    title: str = "Test Post",
    slug: Optional[str] = None,
    status: str = "published",
    published_at: Optional[datetime] = None,
    published_days_ago: Optional[float] = 1,
    **fields: Any,
) -> Post:
    """Build a post directly, bypassing the save pipeline.

    Published posts default to a publication time one day in the past.
    """
    publish_now = status == "published" and published_days_ago is not None
    if published_at is None and publish_now:
        published_at = utc_now() - timedelta(days=published_days_ago)
    return Post(
        id=PostId(uuid4()),
        post_type_id=post_type_id,
        title=title,
        slug=slug,
        status=status,
        published_at=published_at,
        **fields,
    )
