"""Sync post types use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from bunko.application.usecase.base import BaseUseCase
from bunko.domain.model import PostType
from bunko.domain.service import PostTypeService


class PostTypeItem(BaseModel):
    """PostType row in responses."""

    post_type_id: str
    name: str
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post_type(cls, post_type: PostType) -> "PostTypeItem":
        return cls(
            post_type_id=str(post_type.id),
            name=post_type.name.root,
            title=post_type.title,
            created_at=post_type.created_at,
            updated_at=post_type.updated_at,
        )


class SyncPostTypesResponse(BaseModel):
    """Sync post types response."""

    post_types: list[PostTypeItem]


class SyncPostTypesUseCase(BaseUseCase):
    """Use case for creating PostType rows for every declared post type."""

    def __init__(self, post_type_service: PostTypeService) -> None:
        self.post_type_service = post_type_service

    async def execute(self, request: None = None) -> SyncPostTypesResponse:
        with logfire.span("sync_post_types.execute"):
            post_types = await self.post_type_service.sync_from_registry()
            logfire.info("Post types synced", count=len(post_types))
            return SyncPostTypesResponse(
                post_types=[PostTypeItem.from_post_type(pt) for pt in post_types]
            )
