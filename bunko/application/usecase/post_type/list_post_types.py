"""List post types use case."""

from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.domain.service import PostTypeService

from .sync_post_types import PostTypeItem


class ListPostTypesResponse(BaseModel):
    """List post types response."""

    post_types: list[PostTypeItem]


class ListPostTypesUseCase(BaseUseCase):
    """Use case for listing persisted post types."""

    def __init__(self, post_type_service: PostTypeService) -> None:
        self.post_type_service = post_type_service

    async def execute(self, request: None = None) -> ListPostTypesResponse:
        post_types = await self.post_type_service.list_post_types()
        return ListPostTypesResponse(
            post_types=[PostTypeItem.from_post_type(pt) for pt in post_types]
        )
