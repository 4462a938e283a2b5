"""Content taxonomy declarations.

These are configuration-only records held by the ``ContentRegistry``; they
are never persisted. A ``PostTypeDefinition`` is mirrored by a ``PostType``
row once the registry is synchronised to the database.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from bunko.domain.model.common import DomainModel
from bunko.domain.value import PostTypeName
from bunko.domain.value.query import CollectionScope, PostQuery
from bunko.domain.value.types import SLUG_PATTERN


class ListingOptions(DomainModel):
    """Per-declaration listing overrides (None means use global settings)."""

    per_page: Optional[int] = Field(default=None, ge=1)
    order: Optional[str] = None


class _Declaration(DomainModel):
    name: PostTypeName
    title: str = Field(min_length=1)
    path: str
    options: ListingOptions = ListingOptions()

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                f"Path '{v}' must be lowercase alphanumeric segments joined by hyphens"
            )
        return v


class PostTypeDefinition(_Declaration):
    """A declared post type (e.g. blog, docs)."""

    pass


class CollectionDefinition(_Declaration):
    """A declared cross-type aggregation of post types."""

    post_type_names: frozenset[str] = Field(min_length=1)
    scope: Optional[CollectionScope] = None


class CollectionKind(str, Enum):
    """How a resolved identifier filters posts."""

    POST_TYPE = "post_type"
    MULTI_TYPE = "multi_type"


class ResolvedCollection(DomainModel):
    """A declaration resolved to its base query of visible posts."""

    kind: CollectionKind
    definition: PostTypeDefinition | CollectionDefinition
    query: PostQuery
