"""Slug generation policy."""

import re
import secrets
from typing import Optional
from unicodedata import normalize

import logfire

from bunko.domain.repository import PostRepository
from bunko.domain.value import PostId, PostTypeId
from bunko.domain.value.types import SLUG_MAX_LENGTH

from .base import Service

# "-" plus 8 hex characters
SUFFIX_LENGTH = 9


class SlugService(Service):
    """Derives URL-safe slugs from titles, unique per post type."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize slug service.

        Args:
            post_repository: Post repository used for existence checks
        """
        self.post_repository = post_repository

    async def generate_slug(
        self,
        title: str,
        post_type_id: PostTypeId,
        existing_id: Optional[PostId] = None,
    ) -> str:
        """Generate a slug for a title, unique within a post type.

        The existence check only avoids collisions in the common case; the
        store's unique constraint remains authoritative (see
        ``PostService.save``).

        Args:
            title: Post title
            post_type_id: Post type owning the slug namespace
            existing_id: ID of the post being updated, ignored in the check

        Returns:
            The slug, or an empty string when the title has no usable characters
        """
        with logfire.span(
            "slug_service.generate_slug",
            title=title,
            post_type_id=str(post_type_id),
        ):
            base_slug = self.slugify(title)
            if not base_slug:
                logfire.warn("Title produced an empty slug", title=title)
                return ""

            taken = await self.post_repository.slug_exists(
                post_type_id, base_slug, exclude_id=existing_id
            )
            if not taken:
                logfire.info("Generated slug", slug=base_slug)
                return base_slug

            slug = self.with_random_suffix(base_slug)
            logfire.info(
                "Slug collision, added random suffix", base_slug=base_slug, slug=slug
            )
            return slug

    @staticmethod
    def slugify(title: str) -> str:
        """Convert a title to slug format.

        - Transliterates to ASCII where possible (NFKD, accents dropped)
        - Lowercases
        - Replaces runs of anything but letters and digits with one hyphen
        - Strips leading/trailing hyphens
        - Truncates to the maximum slug length

        Args:
            title: Title to slugify

        Returns:
            Slug string (empty if the title has no transliterable characters)
        """
        ascii_title = normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
        slug = re.sub(r"[^a-z0-9]+", "-", ascii_title.lower())
        return slug.strip("-")[:SLUG_MAX_LENGTH].rstrip("-")

    @staticmethod
    def with_random_suffix(base_slug: str) -> str:
        """Append ``-`` and 8 random lowercase hex characters."""
        stem = base_slug[: SLUG_MAX_LENGTH - SUFFIX_LENGTH].rstrip("-")
        return f"{stem}-{secrets.token_hex(4)}"
