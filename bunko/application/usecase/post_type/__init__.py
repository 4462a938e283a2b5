"""PostType use cases."""

from .delete_post_type import (
    DeletePostTypeRequest,
    DeletePostTypeResponse,
    DeletePostTypeUseCase,
)
from .list_post_types import ListPostTypesResponse, ListPostTypesUseCase
from .sync_post_types import PostTypeItem, SyncPostTypesResponse, SyncPostTypesUseCase

__all__ = [
    "DeletePostTypeRequest",
    "DeletePostTypeResponse",
    "DeletePostTypeUseCase",
    "ListPostTypesResponse",
    "ListPostTypesUseCase",
    "PostTypeItem",
    "SyncPostTypesResponse",
    "SyncPostTypesUseCase",
]
