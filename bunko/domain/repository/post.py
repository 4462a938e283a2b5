"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from bunko.domain.model.post import Post
from bunko.domain.value import PostId, PostQuery, PostTypeId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer and must push filtering,
    ordering, limit/offset and counting down to the store.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(
        self, query: PostQuery, limit: Optional[int] = None, offset: int = 0
    ) -> List[Post]:
        """Find posts matching a query, in the query's order.

        Args:
            query: Filter and ordering specification
            limit: Maximum number of posts to return (None for all)
            offset: Number of posts to skip

        Returns:
            Matching posts
        """
        pass

    @abstractmethod
    async def first(self, query: PostQuery) -> Optional[Post]:
        """Return the first post matching a query, if any."""
        pass

    @abstractmethod
    async def count(self, query: PostQuery) -> int:
        """Count posts matching a query (ordering is ignored)."""
        pass

    @abstractmethod
    async def slug_exists(
        self,
        post_type_id: PostTypeId,
        slug: str,
        exclude_id: Optional[PostId] = None,
    ) -> bool:
        """Check whether a slug is taken within a post type.

        Args:
            post_type_id: Post type whose slug namespace is checked
            slug: Slug to look for
            exclude_id: Post to ignore (the post being updated)

        Returns:
            True if another post already uses the slug
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post

        Raises:
            SlugConflictError: If (post_type_id, slug) is already taken
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        pass
