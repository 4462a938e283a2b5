"""Post aggregate root.

A post belongs to exactly one post type. Its slug is unique within that
post type, and its content is either free text (possibly HTML) or a JSON
tree produced by a block editor.
"""

import html
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from bunko.domain.model.common import DomainModel
from bunko.domain.value import PostId, PostStatus, PostTypeId, as_utc, utc_now

Content = str | dict[str, Any] | list[Any]

DATE_FORMATS = {
    "long": "%B %d, %Y %H:%M",
    "short": "%d %b %H:%M",
}


class Post(DomainModel):
    """Post aggregate root.

    Derived fields (slug, published_at, word_count) are filled in by the
    save pipeline in ``PostService``; the model itself only holds data.
    """

    id: PostId
    post_type_id: PostTypeId
    title: str = Field(default="", max_length=255)
    slug: Optional[str] = None
    content: Optional[Content] = None
    status: str = PostStatus.DRAFT.value
    published_at: Optional[datetime] = None
    word_count: Optional[int] = Field(default=None, ge=0)
    title_tag: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("published_at", "created_at", "updated_at")
    @classmethod
    def normalize_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store naive timestamps as UTC."""
        return as_utc(v)

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED.value

    def is_scheduled(self, now: Optional[datetime] = None) -> bool:
        """Published with a publication time still in the future."""
        now = as_utc(now) or utc_now()
        return (
            self.is_published
            and self.published_at is not None
            and self.published_at > now
        )

    def is_visible(self, now: Optional[datetime] = None) -> bool:
        """Published and no longer in the future."""
        now = as_utc(now) or utc_now()
        return (
            self.is_published
            and self.published_at is not None
            and self.published_at <= now
        )

    def to_param(self) -> Optional[str]:
        """URL parameter identifying the post within its collection."""
        return self.slug

    def published_date(
        self, format: Literal["long", "short"] = "long"
    ) -> Optional[str]:
        """Formatted publication date, or None when unpublished."""
        if self.published_at is None:
            return None
        return self.published_at.strftime(DATE_FORMATS[format])

    def meta_description_tag(self) -> Optional[str]:
        """HTML meta description tag with the description escaped."""
        if not self.meta_description:
            return None
        content = html.escape(self.meta_description)
        return f'<meta name="description" content="{content}">'
