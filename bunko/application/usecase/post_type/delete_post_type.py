"""Delete post type use case."""

import logfire
from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.domain.service import PostTypeService


class DeletePostTypeRequest(BaseModel):
    """Delete post type request."""

    name: str


class DeletePostTypeResponse(BaseModel):
    """Delete post type response."""

    name: str
    deleted: bool


class DeletePostTypeUseCase(BaseUseCase):
    """Use case for deleting an unused post type."""

    def __init__(self, post_type_service: PostTypeService) -> None:
        self.post_type_service = post_type_service

    async def execute(self, request: DeletePostTypeRequest) -> DeletePostTypeResponse:
        """Execute delete post type flow.

        Raises:
            NotFoundError: If the post type does not exist
            BusinessRuleViolationError: If posts still reference it
        """
        with logfire.span("delete_post_type.execute", name=request.name):
            await self.post_type_service.delete_post_type(request.name)
            return DeletePostTypeResponse(name=request.name, deleted=True)
