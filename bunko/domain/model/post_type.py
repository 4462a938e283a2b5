"""PostType entity."""

from datetime import datetime

from pydantic import Field, field_validator

from bunko.domain.model.common import DomainModel
from bunko.domain.value import PostTypeId, PostTypeName, as_utc, utc_now


class PostType(DomainModel):
    """A persisted content category with its own slug namespace.

    The name is immutable once created. A post type cannot be deleted while
    posts reference it.
    """

    id: PostTypeId
    name: PostTypeName
    title: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        return as_utc(v)
