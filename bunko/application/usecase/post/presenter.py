"""Response models and presentation of posts."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bunko.domain.error import ValidationError
from bunko.domain.model import Post
from bunko.domain.service import WordCountService
from bunko.domain.value import PaginationMeta, PostTypeId, utc_now


class PostSummary(BaseModel):
    """Post as shown in listings."""

    post_id: str
    post_type: Optional[str]
    slug: Optional[str]
    title: str
    status: str
    excerpt: Optional[str]
    published_at: Optional[datetime]
    published_date: Optional[str]
    word_count: Optional[int]
    reading_time: Optional[int]
    reading_time_text: Optional[str]
    is_scheduled: bool


class PostDetail(PostSummary):
    """Post with its full content and SEO fields."""

    content: Any
    title_tag: Optional[str]
    meta_description: Optional[str]
    meta_description_tag: Optional[str]
    created_at: datetime
    updated_at: datetime


class PaginationResponse(BaseModel):
    """Pagination metadata, keyed as the presentation layer expects."""

    current_page: int
    per_page: int
    total_count: int
    total_pages: int
    prev_page: Optional[int]
    next_page: Optional[int]

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationResponse":
        return cls(**meta.model_dump())


class PostPresenter:
    """Builds response models, adding derived reading metrics."""

    def __init__(
        self,
        word_count_service: WordCountService,
        post_type_names: dict[PostTypeId, str],
        now: Optional[datetime] = None,
    ) -> None:
        self.word_count_service = word_count_service
        self.post_type_names = post_type_names
        self.now = now or utc_now()

    def _summary_fields(self, post: Post) -> dict[str, Any]:
        return {
            "post_id": str(post.id),
            "post_type": self.post_type_names.get(post.post_type_id),
            "slug": post.to_param(),
            "title": post.title,
            "status": post.status,
            "excerpt": self.word_count_service.excerpt(post.content),
            "published_at": post.published_at,
            "published_date": post.published_date(),
            "word_count": post.word_count,
            "reading_time": self.word_count_service.reading_time(post.word_count),
            "reading_time_text": self.word_count_service.reading_time_text(
                post.word_count
            ),
            "is_scheduled": post.is_scheduled(self.now),
        }

    def summary(self, post: Post) -> PostSummary:
        return PostSummary(**self._summary_fields(post))

    def detail(self, post: Post) -> PostDetail:
        return PostDetail(
            **self._summary_fields(post),
            content=post.content,
            title_tag=post.title_tag,
            meta_description=post.meta_description,
            meta_description_tag=post.meta_description_tag(),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


def build_post(**fields: Any) -> Post:
    """Construct a Post, reporting field errors as a domain ValidationError."""
    try:
        return Post(**fields)
    except PydanticValidationError as e:
        errors: dict[str, list[str]] = {}
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "post"
            errors.setdefault(field, []).append(error["msg"])
        raise ValidationError(errors) from e
