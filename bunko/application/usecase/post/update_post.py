"""Update post use case."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.domain.error import NotFoundError
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import PostService, WordCountService
from bunko.domain.value import PostId

from .presenter import PostDetail, PostPresenter, build_post


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only fields that are explicitly set are changed. Setting ``slug`` to
    null regenerates it from the title.
    """

    post_id: str  # UUID string
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Any = None
    status: Optional[str] = None
    published_at: Optional[datetime] = None
    word_count: Optional[int] = None
    title_tag: Optional[str] = None
    meta_description: Optional[str] = None


class UpdatePostResponse(PostDetail):
    """Update post response."""

    pass


class UpdatePostUseCase(BaseUseCase):
    """Use case for updating a post."""

    def __init__(
        self,
        post_service: PostService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            post_type_repository: PostType repository
            word_count_service: Reading metrics for the response
        """
        self.post_service = post_service
        self.post_type_repository = post_type_repository
        self.word_count_service = word_count_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If the updated post is invalid
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("update_post.execute", post_id=request.post_id):
            # 1. Retrieve existing post
            previous = await self.post_service.get_post_by_id(post_id)
            if previous is None:
                raise NotFoundError("Post", request.post_id)

            # 2. Apply the explicitly set fields
            changes = request.model_dump(exclude_unset=True, exclude={"post_id"})
            # title and status are not nullable; null means unchanged
            for field in ("title", "status"):
                if changes.get(field) is None:
                    changes.pop(field, None)
            post = build_post(**(previous.model_dump() | changes))

            # 3. Save through the pipeline, comparing against the stored version
            updated_post = await self.post_service.save_post(post, previous=previous)
            logfire.info(
                "Post updated", post_id=str(updated_post.id), fields=sorted(changes)
            )

            post_type = await self.post_type_repository.find_by_id(
                updated_post.post_type_id
            )
            names = {post_type.id: post_type.name.root} if post_type else {}
            presenter = PostPresenter(self.word_count_service, names)
            return UpdatePostResponse(**presenter.detail(updated_post).model_dump())
