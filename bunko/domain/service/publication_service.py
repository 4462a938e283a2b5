"""Publication state policy.

Stored statuses are ``draft`` and ``published``. "Scheduled" is a derived
view: a published post whose ``published_at`` is still in the future.
Scheduling therefore happens in one step by saving a post as published
with a future ``published_at``.
"""

from datetime import datetime
from typing import Optional

import logfire

from bunko.config import ContentSettings
from bunko.domain.model.post import Post
from bunko.domain.value import PostField, PostQuery, PostStatus, as_utc, utc_now

from .base import Service


class PublicationService(Service):
    """Status validation, published_at assignment and visibility queries."""

    def __init__(self, settings: ContentSettings) -> None:
        """Initialize publication service.

        Args:
            settings: Content settings providing the valid statuses
        """
        self.settings = settings

    def is_valid_status(self, status: str) -> bool:
        return status in self.settings.valid_statuses

    def assign_published_at(self, post: Post, now: Optional[datetime] = None) -> Post:
        """Stamp published_at when a post is published without one.

        An existing published_at (e.g. a future one set to schedule the
        post) is never overwritten.
        """
        if not post.is_published or post.published_at is not None:
            return post
        published_at = as_utc(now) or utc_now()
        logfire.info(
            "Assigning published_at", post_id=str(post.id), published_at=published_at
        )
        return post.model_copy(update={"published_at": published_at})

    def published(
        self, query: Optional[PostQuery] = None, now: Optional[datetime] = None
    ) -> PostQuery:
        """Publicly visible posts, newest publication first."""
        now = as_utc(now) or utc_now()
        return (
            (query or PostQuery())
            .where(PostField.STATUS, "eq", PostStatus.PUBLISHED.value)
            .where(PostField.PUBLISHED_AT, "le", now)
            .reorder(PostField.PUBLISHED_AT, descending=True)
        )

    def drafts(self, query: Optional[PostQuery] = None) -> PostQuery:
        """Draft posts, newest created first."""
        return (
            (query or PostQuery())
            .where(PostField.STATUS, "eq", PostStatus.DRAFT.value)
            .reorder(PostField.CREATED_AT, descending=True)
        )

    def scheduled(
        self, query: Optional[PostQuery] = None, now: Optional[datetime] = None
    ) -> PostQuery:
        """Published posts waiting for their publication time, soonest first."""
        now = as_utc(now) or utc_now()
        return (
            (query or PostQuery())
            .where(PostField.STATUS, "eq", PostStatus.PUBLISHED.value)
            .where(PostField.PUBLISHED_AT, "gt", now)
            .reorder(PostField.PUBLISHED_AT, descending=False)
        )
