"""List collection use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.application.usecase.post import (
    PaginationResponse,
    PostPresenter,
    PostSummary,
)
from bunko.domain.model import CollectionKind
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import CollectionService, WordCountService


class ListCollectionRequest(BaseModel):
    """List collection request."""

    collection: str  # Post type or collection name, or its URL path
    page: Optional[int] = None  # Values below 1 mean page 1


class CollectionInfo(BaseModel):
    """The resolved post type or collection."""

    name: str
    title: str
    path: str
    kind: CollectionKind


class ListCollectionResponse(BaseModel):
    """Listing envelope: items plus pagination metadata."""

    collection: CollectionInfo
    items: list[PostSummary]
    pagination: PaginationResponse


class ListCollectionUseCase(BaseUseCase):
    """Use case for listing the published posts of a collection."""

    def __init__(
        self,
        collection_service: CollectionService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> None:
        """Initialize list collection use case.

        Args:
            collection_service: Collection query engine
            post_type_repository: PostType repository (type names for items)
            word_count_service: Reading metrics for the response
        """
        self.collection_service = collection_service
        self.post_type_repository = post_type_repository
        self.word_count_service = word_count_service

    async def execute(
        self, request: ListCollectionRequest
    ) -> Optional[ListCollectionResponse]:
        """Execute list collection flow.

        Returns:
            The listing, or None when the collection is unknown
        """
        with logfire.span(
            "list_collection.execute",
            collection=request.collection,
            page=request.page,
        ):
            listing = await self.collection_service.list_posts(
                request.collection, page=request.page
            )
            if listing is None:
                return None
            resolved, page = listing

            post_types = await self.post_type_repository.find_all()
            presenter = PostPresenter(
                self.word_count_service, {pt.id: pt.name.root for pt in post_types}
            )
            definition = resolved.definition

            logfire.info(
                "Collection listed",
                collection=definition.name.root,
                items=len(page.items),
                total_count=page.pagination.total_count,
            )
            return ListCollectionResponse(
                collection=CollectionInfo(
                    name=definition.name.root,
                    title=definition.title,
                    path=definition.path,
                    kind=resolved.kind,
                ),
                items=[presenter.summary(post) for post in page.items],
                pagination=PaginationResponse.from_meta(page.pagination),
            )
