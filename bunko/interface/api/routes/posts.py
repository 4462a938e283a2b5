"""Post management routes."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from bunko.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostView,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from bunko.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def validation_failed(error: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": str(error), "errors": error.errors},
    )


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    post_type: str = Field(min_length=1)
    title: str = Field(default="", max_length=255)
    slug: Optional[str] = None
    content: str | dict[str, Any] | list[Any] | None = None
    status: str = "draft"
    published_at: Optional[datetime] = None
    word_count: Optional[int] = Field(default=None, ge=0)
    title_tag: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = None


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, max_length=255)
    slug: Optional[str] = None
    content: str | dict[str, Any] | list[Any] | None = None
    status: Optional[str] = None
    published_at: Optional[datetime] = None
    word_count: Optional[int] = Field(default=None, ge=0)
    title_tag: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = None


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a post in a post type.

    Raises:
        HTTPException: 404 for an unknown post type, 422 if validation fails
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Post creation validation error", errors=e.errors)
        raise validation_failed(e)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    view: PostView = Query(default=PostView.PUBLISHED),
    post_type: Optional[str] = Query(default=None),
    page: int = Query(default=1),
    per_page: Optional[int] = Query(default=None, ge=1, le=100),
) -> ListPostsResponse:
    """List posts by publication state: published, draft or scheduled."""
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                view=view, post_type=post_type, page=page, per_page=per_page
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get any post by ID, including drafts and scheduled posts."""
    result = await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post not found: {post_id}",
        )
    return result


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update a post. Only the fields present in the body change.

    Raises:
        HTTPException: 404 if the post does not exist, 422 if validation fails
    """
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id), **request.model_dump(exclude_unset=True)
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Post update validation error", errors=e.errors)
        raise validation_failed(e)
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )
