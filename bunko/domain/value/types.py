"""Domain value objects for content.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from bunko.domain.value.common import RootValueObject

SLUG_MAX_LENGTH = 255

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
NAME_PATTERN = re.compile(r"^[a-z0-9_]+$")


class PostStatus(str, Enum):
    """Status values understood by the publication workflow.

    Only DRAFT and PUBLISHED drive behaviour. Scheduling is derived from a
    published post whose published_at lies in the future; SCHEDULED is kept
    so configurations listing it stay valid.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"


class CollectionOrder(str, Enum):
    """Ordering strategies for collection listings."""

    PUBLISHED_AT_DESC = "published_at_desc"
    PUBLISHED_AT_ASC = "published_at_asc"
    CREATED_AT_DESC = "created_at_desc"
    CREATED_AT_ASC = "created_at_asc"


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with single hyphens, 1-255 characters.
    Examples: 'hello-world', 'getting-started-2f9a1c3e'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if len(v) < 1 or len(v) > SLUG_MAX_LENGTH:
            raise ValueError(f"Slug must be 1-{SLUG_MAX_LENGTH} characters")
        if not SLUG_PATTERN.match(v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class PostTypeName(RootValueObject[str]):
    """Identifier of a post type or collection.

    Lowercase snake case only. Hyphens are reserved for URL paths, which
    are derived from the name.
    Examples: 'blog', 'case_study', 'news_2024'
    """

    @field_validator("root")
    @classmethod
    def validate_name_format(cls, v: str) -> str:
        """Validate name format."""
        if not NAME_PATTERN.match(v):
            raise ValueError(
                f"Name '{v}' must contain only lowercase letters, "
                "digits and underscores"
            )
        return v

    @property
    def path(self) -> str:
        """Default URL path segment for this name."""
        return self.root.replace("_", "-")

    @property
    def default_title(self) -> str:
        """Human title derived from the name ('case_study' -> 'Case Study')."""
        return self.root.replace("_", " ").title()
