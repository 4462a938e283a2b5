"""Collection use cases."""

from .get_collection_post import (
    GetCollectionPostRequest,
    GetCollectionPostResponse,
    GetCollectionPostUseCase,
)
from .list_collection import (
    CollectionInfo,
    ListCollectionRequest,
    ListCollectionResponse,
    ListCollectionUseCase,
)

__all__ = [
    "CollectionInfo",
    "GetCollectionPostRequest",
    "GetCollectionPostResponse",
    "GetCollectionPostUseCase",
    "ListCollectionRequest",
    "ListCollectionResponse",
    "ListCollectionUseCase",
]
