"""Get collection post use case."""

from typing import Optional

from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.application.usecase.post import PostDetail, PostPresenter
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import CollectionService, WordCountService


class GetCollectionPostRequest(BaseModel):
    """Get collection post request."""

    collection: str
    slug: str


class GetCollectionPostResponse(BaseModel):
    """Single post envelope."""

    post: PostDetail


class GetCollectionPostUseCase(BaseUseCase):
    """Use case for showing one visible post of a collection by slug."""

    def __init__(
        self,
        collection_service: CollectionService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> None:
        self.collection_service = collection_service
        self.post_type_repository = post_type_repository
        self.word_count_service = word_count_service

    async def execute(
        self, request: GetCollectionPostRequest
    ) -> Optional[GetCollectionPostResponse]:
        """Execute get collection post flow.

        Returns:
            The post, or None when the collection is unknown or the slug is
            not visible in it
        """
        post = await self.collection_service.find_by_slug(
            request.collection, request.slug
        )
        if post is None:
            return None

        post_type = await self.post_type_repository.find_by_id(post.post_type_id)
        names = {post_type.id: post_type.name.root} if post_type else {}
        presenter = PostPresenter(self.word_count_service, names)
        return GetCollectionPostResponse(post=presenter.detail(post))
