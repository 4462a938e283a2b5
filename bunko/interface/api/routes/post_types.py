"""Post type routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from bunko.application.usecase.post_type import (
    DeletePostTypeRequest,
    DeletePostTypeResponse,
    DeletePostTypeUseCase,
    ListPostTypesResponse,
    ListPostTypesUseCase,
    SyncPostTypesResponse,
    SyncPostTypesUseCase,
)
from bunko.domain.error import BusinessRuleViolationError, NotFoundError

router = APIRouter(prefix="/post-types", tags=["post types"], route_class=DishkaRoute)


@router.get("", response_model=ListPostTypesResponse)
async def list_post_types(
    list_post_types_use_case: FromDishka[ListPostTypesUseCase],
) -> ListPostTypesResponse:
    """List the post types stored in the database."""
    return await list_post_types_use_case.execute()


@router.post("/sync", response_model=SyncPostTypesResponse)
async def sync_post_types(
    sync_post_types_use_case: FromDishka[SyncPostTypesUseCase],
) -> SyncPostTypesResponse:
    """Create or update a PostType row for every declared post type."""
    return await sync_post_types_use_case.execute()


@router.delete("/{name}", response_model=DeletePostTypeResponse)
async def delete_post_type(
    name: str,
    delete_post_type_use_case: FromDishka[DeletePostTypeUseCase],
) -> DeletePostTypeResponse:
    """Delete a post type that no post references.

    Raises:
        HTTPException: 404 if unknown, 409 while posts still use it
    """
    try:
        return await delete_post_type_use_case.execute(DeletePostTypeRequest(name=name))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BusinessRuleViolationError as e:
        logfire.warn("Post type delete refused", name=name, error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
