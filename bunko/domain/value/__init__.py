"""Domain value objects for content."""

from bunko.domain.value.common import as_utc, utc_now
from bunko.domain.value.identifiers import PostId, PostTypeId
from bunko.domain.value.pagination import Page, PaginationMeta
from bunko.domain.value.query import (
    CollectionScope,
    Condition,
    Operator,
    Ordering,
    PostField,
    PostQuery,
)
from bunko.domain.value.types import (
    CollectionOrder,
    PostStatus,
    PostTypeName,
    Slug,
)

__all__ = [
    # Identifiers
    "PostId",
    "PostTypeId",
    # Types
    "CollectionOrder",
    "PostStatus",
    "PostTypeName",
    "Slug",
    # Pagination
    "Page",
    "PaginationMeta",
    # Queries
    "CollectionScope",
    "Condition",
    "Operator",
    "Ordering",
    "PostField",
    "PostQuery",
    # Time
    "as_utc",
    "utc_now",
]
