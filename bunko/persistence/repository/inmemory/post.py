"""In-memory post repository for testing."""

from typing import List, Optional

from bunko.domain.error import SlugConflictError
from bunko.domain.model.post import Post
from bunko.domain.repository.post import PostRepository
from bunko.domain.value import PostId, PostQuery, PostTypeId

from .store import InMemoryStore, select_posts


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Emulates the (post_type_id, slug) unique constraint of the real table.
    """

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _posts(self) -> dict[PostId, Post]:
        return self._store.posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find(
        self, query: PostQuery, limit: Optional[int] = None, offset: int = 0
    ) -> List[Post]:
        """Find posts matching a query."""
        posts = select_posts(list(self._posts.values()), query)
        end = None if limit is None else offset + limit
        return posts[offset:end]

    async def first(self, query: PostQuery) -> Optional[Post]:
        posts = await self.find(query, limit=1)
        return posts[0] if posts else None

    async def count(self, query: PostQuery) -> int:
        return len(select_posts(list(self._posts.values()), query))

    async def slug_exists(
        self,
        post_type_id: PostTypeId,
        slug: str,
        exclude_id: Optional[PostId] = None,
    ) -> bool:
        """Check if a slug is taken within a post type."""
        return any(
            p.post_type_id == post_type_id and p.slug == slug and p.id != exclude_id
            for p in self._posts.values()
        )

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        if await self.slug_exists(post.post_type_id, post.slug or "", post.id):
            raise SlugConflictError(str(post.post_type_id), post.slug or "")
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
