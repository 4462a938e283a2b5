"""Create post use case."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire
from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.domain.error import NotFoundError
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import PostService, WordCountService
from bunko.domain.value import PostId, PostStatus

from .presenter import PostDetail, PostPresenter, build_post


class CreatePostRequest(BaseModel):
    """Create post request."""

    post_type: str  # PostType name, e.g. 'blog'
    title: str = ""
    slug: Optional[str] = None  # Generated from the title when omitted
    content: Any = None  # Plain text/HTML or a block editor JSON tree
    status: str = PostStatus.DRAFT.value
    published_at: Optional[datetime] = None  # Future value schedules the post
    word_count: Optional[int] = None  # Kept only when auto update is off
    title_tag: Optional[str] = None
    meta_description: Optional[str] = None


class CreatePostResponse(PostDetail):
    """Create post response."""

    pass


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            post_type_repository: PostType repository
            word_count_service: Reading metrics for the response
        """
        self.post_service = post_service
        self.post_type_repository = post_type_repository
        self.word_count_service = word_count_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Resolve the post type by name
        2. Build the Post entity (field validation happens in the model)
        3. Save through the PostService pipeline (slug, published_at,
           validation, word count)

        Raises:
            NotFoundError: If the post type does not exist
            ValidationError: If the post is invalid
        """
        with logfire.span(
            "create_post.execute", post_type=request.post_type, title=request.title
        ):
            post_type = await self.post_type_repository.find_by_name(request.post_type)
            if post_type is None:
                raise NotFoundError("PostType", request.post_type)

            post = build_post(
                id=PostId(uuid4()),
                post_type_id=post_type.id,
                **request.model_dump(exclude={"post_type"}),
            )
            saved_post = await self.post_service.save_post(post)

            logfire.info(
                "Post created successfully",
                post_id=str(saved_post.id),
                slug=saved_post.slug,
            )

            presenter = PostPresenter(
                self.word_count_service, {post_type.id: post_type.name.root}
            )
            return CreatePostResponse(**presenter.detail(saved_post).model_dump())
