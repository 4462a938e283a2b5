"""List posts use case (editorial views)."""

from enum import Enum
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from bunko.application.usecase.base import BaseUseCase
from bunko.config import ContentSettings
from bunko.domain.error import NotFoundError
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import (
    CollectionService,
    PublicationService,
    WordCountService,
)
from bunko.domain.value import PostField

from .presenter import PaginationResponse, PostPresenter, PostSummary


class PostView(str, Enum):
    """Publication state views."""

    PUBLISHED = "published"
    DRAFT = "draft"
    SCHEDULED = "scheduled"


class ListPostsRequest(BaseModel):
    """List posts request."""

    view: PostView = PostView.PUBLISHED
    post_type: Optional[str] = None  # Restrict to one post type
    page: int = 1
    per_page: Optional[int] = Field(default=None, ge=1, le=100)


class ListPostsResponse(BaseModel):
    """List posts response."""

    items: list[PostSummary]
    pagination: PaginationResponse


class ListPostsUseCase(BaseUseCase):
    """Use case for listing published, draft or scheduled posts."""

    def __init__(
        self,
        collection_service: CollectionService,
        publication_service: PublicationService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
        settings: ContentSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            collection_service: Pagination
            publication_service: View queries
            post_type_repository: PostType repository
            word_count_service: Reading metrics for the response
            settings: Content settings (default page size)
        """
        self.collection_service = collection_service
        self.publication_service = publication_service
        self.post_type_repository = post_type_repository
        self.word_count_service = word_count_service
        self.settings = settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            NotFoundError: If ``post_type`` names an unknown post type
        """
        with logfire.span(
            "list_posts.execute",
            view=request.view.value,
            post_type=request.post_type,
            page=request.page,
        ):
            if request.view == PostView.DRAFT:
                query = self.publication_service.drafts()
            elif request.view == PostView.SCHEDULED:
                query = self.publication_service.scheduled()
            else:
                query = self.publication_service.published()

            if request.post_type is not None:
                post_type = await self.post_type_repository.find_by_name(
                    request.post_type
                )
                if post_type is None:
                    raise NotFoundError("PostType", request.post_type)
                query = query.where(PostField.POST_TYPE_ID, "eq", post_type.id)

            page = await self.collection_service.paginate(
                query, request.page, request.per_page or self.settings.per_page
            )

            post_types = await self.post_type_repository.find_all()
            presenter = PostPresenter(
                self.word_count_service, {pt.id: pt.name.root for pt in post_types}
            )
            return ListPostsResponse(
                items=[presenter.summary(post) for post in page.items],
                pagination=PaginationResponse.from_meta(page.pagination),
            )
