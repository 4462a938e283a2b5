"""Collection query engine.

Resolves a post type or collection identifier to a query over publicly
visible posts, then orders and paginates it in the store.
"""

from datetime import datetime
from typing import Optional

import logfire

from bunko.config import ContentSettings
from bunko.domain.model import (
    CollectionDefinition,
    CollectionKind,
    Post,
    PostTypeDefinition,
    ResolvedCollection,
)
from bunko.domain.registry import ContentRegistry
from bunko.domain.repository import PostRepository, PostTypeRepository
from bunko.domain.value import (
    CollectionOrder,
    Page,
    PaginationMeta,
    PostField,
    PostQuery,
)
from bunko.domain.value.pagination import normalize_page, page_offset

from .base import Service
from .publication_service import PublicationService

ORDERINGS = {
    CollectionOrder.PUBLISHED_AT_DESC.value: (PostField.PUBLISHED_AT, True),
    CollectionOrder.PUBLISHED_AT_ASC.value: (PostField.PUBLISHED_AT, False),
    CollectionOrder.CREATED_AT_DESC.value: (PostField.CREATED_AT, True),
    CollectionOrder.CREATED_AT_ASC.value: (PostField.CREATED_AT, False),
}


class CollectionService(Service):
    """Domain service for listing and looking up posts by collection."""

    def __init__(
        self,
        registry: ContentRegistry,
        post_repository: PostRepository,
        post_type_repository: PostTypeRepository,
        publication_service: PublicationService,
        settings: ContentSettings,
    ) -> None:
        """Initialize collection service.

        Args:
            registry: Declared post types and collections
            post_repository: Post repository
            post_type_repository: PostType repository (name to ID lookup)
            publication_service: Visibility queries
            settings: Content settings (listing defaults)
        """
        self.registry = registry
        self.post_repository = post_repository
        self.post_type_repository = post_type_repository
        self.publication_service = publication_service
        self.settings = settings

    async def resolve_collection(
        self, identifier: str, now: Optional[datetime] = None
    ) -> Optional[ResolvedCollection]:
        """Resolve an identifier to its base query of published posts.

        Names are matched first (post types before collections), then URL
        paths. A post type that has not been synchronised to the store
        resolves to nothing.

        Args:
            identifier: Post type or collection name, or its URL path
            now: Reference time for visibility (defaults to the wall clock)

        Returns:
            The resolved collection, or None when nothing matches
        """
        with logfire.span(
            "collection_service.resolve_collection", identifier=identifier
        ):
            definition = (
                self.registry.find_post_type(identifier)
                or self.registry.find_collection(identifier)
                or self.registry.find_by_path(identifier)
            )
            if definition is None:
                logfire.info("Unknown collection", identifier=identifier)
                return None

            published = self.publication_service.published(now=now)
            if isinstance(definition, PostTypeDefinition):
                return await self._resolve_post_type(definition, published)
            return await self._resolve_multi_type(definition, published)

    @staticmethod
    def apply_ordering(query: PostQuery, order_key: Optional[str]) -> PostQuery:
        """Reorder by a named ordering; unknown keys keep the current order."""
        ordering = ORDERINGS.get(order_key or "")
        if ordering is None:
            logfire.debug("Ignoring unknown ordering", order_key=order_key)
            return query
        field, descending = ordering
        return query.reorder(field, descending=descending)

    async def paginate(
        self, query: PostQuery, page: Optional[int], per_page: int
    ) -> Page[Post]:
        """Fetch one page of a query plus its pagination metadata.

        Args:
            query: Filter and ordering specification
            page: Requested page (values below 1 mean page 1)
            per_page: Page size

        Returns:
            The page of posts
        """
        page = normalize_page(page)
        with logfire.span("collection_service.paginate", page=page, per_page=per_page):
            total_count = await self.post_repository.count(query)
            items = await self.post_repository.find(
                query, limit=per_page, offset=page_offset(page, per_page)
            )
            pagination = PaginationMeta.compute(page, per_page, total_count)

            logfire.info(
                "Paginated posts",
                page=page,
                items=len(items),
                total_count=total_count,
                total_pages=pagination.total_pages,
            )
            return Page[Post](items=items, pagination=pagination)

    async def list_posts(
        self,
        identifier: str,
        page: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Optional[tuple[ResolvedCollection, Page[Post]]]:
        """List one page of a post type or collection.

        Returns:
            The resolved collection and the page, or None when the identifier
            is unknown
        """
        resolved = await self.resolve_collection(identifier, now=now)
        if resolved is None:
            return None

        options = resolved.definition.options
        per_page = options.per_page or self.settings.per_page
        order = options.order or self.settings.order
        query = self.apply_ordering(resolved.query, order)
        return resolved, await self.paginate(query, page, per_page)

    async def find_by_slug(
        self, identifier: str, slug: str, now: Optional[datetime] = None
    ) -> Optional[Post]:
        """Find a visible post by slug within a post type or collection.

        Drafts and posts scheduled for the future are never returned.
        """
        with logfire.span(
            "collection_service.find_by_slug", identifier=identifier, slug=slug
        ):
            resolved = await self.resolve_collection(identifier, now=now)
            if resolved is None:
                return None

            post = await self.post_repository.first(
                resolved.query.where(PostField.SLUG, "eq", slug)
            )
            if post is None:
                logfire.info(
                    "Post not found in collection", identifier=identifier, slug=slug
                )
            return post

    async def _resolve_post_type(
        self, definition: PostTypeDefinition, published: PostQuery
    ) -> Optional[ResolvedCollection]:
        post_type = await self.post_type_repository.find_by_name(definition.name.root)
        if post_type is None:
            logfire.warn("Post type not synchronised", name=definition.name.root)
            return None
        return ResolvedCollection(
            kind=CollectionKind.POST_TYPE,
            definition=definition,
            query=published.where(PostField.POST_TYPE_ID, "eq", post_type.id),
        )

    async def _resolve_multi_type(
        self, definition: CollectionDefinition, published: PostQuery
    ) -> ResolvedCollection:
        post_types = await self.post_type_repository.find_by_names(
            definition.post_type_names
        )
        query = published.where_in(PostField.POST_TYPE_ID, [pt.id for pt in post_types])
        if definition.scope is not None:
            query = definition.scope.apply(query)
        return ResolvedCollection(
            kind=CollectionKind.MULTI_TYPE, definition=definition, query=query
        )
