"""Public collection routes.

Mounted last: ``/{collection_path}`` matches any single path segment, so
every fixed route must be registered before it.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from bunko.application.usecase.collection import (
    GetCollectionPostRequest,
    GetCollectionPostResponse,
    GetCollectionPostUseCase,
    ListCollectionRequest,
    ListCollectionResponse,
    ListCollectionUseCase,
)

router = APIRouter(tags=["collections"], route_class=DishkaRoute)


@router.get("/{collection_path}", response_model=ListCollectionResponse)
async def list_collection(
    collection_path: str,
    list_collection_use_case: FromDishka[ListCollectionUseCase],
    page: Optional[int] = Query(default=None),
) -> ListCollectionResponse:
    """List published posts of a post type or collection, one page at a time."""
    result = await list_collection_use_case.execute(
        ListCollectionRequest(collection=collection_path, page=page)
    )
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Collection not found: {collection_path}",
        )
    return result


@router.get("/{collection_path}/{slug}", response_model=GetCollectionPostResponse)
async def get_collection_post(
    collection_path: str,
    slug: str,
    get_collection_post_use_case: FromDishka[GetCollectionPostUseCase],
) -> GetCollectionPostResponse:
    """Show one published post of a post type or collection."""
    result = await get_collection_post_use_case.execute(
        GetCollectionPostRequest(collection=collection_path, slug=slug)
    )
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post not found: {collection_path}/{slug}",
        )
    return result
