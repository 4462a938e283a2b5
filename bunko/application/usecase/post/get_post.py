"""Get post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import PostService, WordCountService
from bunko.domain.value import PostId

from .presenter import PostDetail, PostPresenter


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(PostDetail):
    """Get post response."""

    pass


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving any post by ID, whatever its status."""

    def __init__(
        self,
        post_service: PostService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> None:
        self.post_service = post_service
        self.post_type_repository = post_type_repository
        self.word_count_service = word_count_service

    async def execute(self, request: GetPostRequest) -> Optional[GetPostResponse]:
        """Execute get post flow.

        Returns:
            Post details if found, None otherwise
        """
        post = await self.post_service.get_post_by_id(PostId(UUID(request.post_id)))
        if post is None:
            return None

        post_type = await self.post_type_repository.find_by_id(post.post_type_id)
        names = {post_type.id: post_type.name.root} if post_type else {}
        presenter = PostPresenter(self.word_count_service, names)
        return GetPostResponse(**presenter.detail(post).model_dump())
