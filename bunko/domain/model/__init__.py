"""Domain models for content."""

from bunko.domain.model.collection import (
    CollectionDefinition,
    CollectionKind,
    ListingOptions,
    PostTypeDefinition,
    ResolvedCollection,
)
from bunko.domain.model.common import DomainModel
from bunko.domain.model.post import Post
from bunko.domain.model.post_type import PostType

__all__ = [
    "CollectionDefinition",
    "CollectionKind",
    "DomainModel",
    "ListingOptions",
    "Post",
    "PostType",
    "PostTypeDefinition",
    "ResolvedCollection",
]
