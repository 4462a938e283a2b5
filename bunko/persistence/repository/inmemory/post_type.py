"""In-memory post type repository for testing."""

from typing import Iterable, List, Optional

from bunko.domain.error import BusinessRuleViolationError
from bunko.domain.model.post_type import PostType
from bunko.domain.repository.post_type import PostTypeRepository
from bunko.domain.value import PostTypeId

from .store import InMemoryStore


class InMemoryPostTypeRepository(PostTypeRepository):
    """In-memory implementation of PostTypeRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _post_types(self) -> dict[PostTypeId, PostType]:
        return self._store.post_types

    async def find_by_id(self, post_type_id: PostTypeId) -> Optional[PostType]:
        return self._post_types.get(post_type_id)

    async def find_by_name(self, name: str) -> Optional[PostType]:
        for post_type in self._post_types.values():
            if post_type.name.root == name:
                return post_type
        return None

    async def find_by_names(self, names: Iterable[str]) -> List[PostType]:
        wanted = set(names)
        return sorted(
            (pt for pt in self._post_types.values() if pt.name.root in wanted),
            key=lambda pt: pt.name.root,
        )

    async def find_all(self) -> List[PostType]:
        return sorted(self._post_types.values(), key=lambda pt: pt.name.root)

    async def save(self, post_type: PostType) -> PostType:
        self._post_types[post_type.id] = post_type
        return post_type

    async def delete(self, post_type_id: PostTypeId) -> None:
        """Delete a post type; refused while posts reference it (ON DELETE RESTRICT)."""
        post_count = sum(
            1 for p in self._store.posts.values() if p.post_type_id == post_type_id
        )
        if post_count:
            raise BusinessRuleViolationError(
                f"Cannot delete post type with {post_count} existing posts"
            )
        self._post_types.pop(post_type_id, None)
