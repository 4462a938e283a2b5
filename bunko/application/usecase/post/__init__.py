"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase, PostView
from .presenter import PaginationResponse, PostDetail, PostPresenter, PostSummary
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PaginationResponse",
    "PostDetail",
    "PostPresenter",
    "PostSummary",
    "PostView",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
