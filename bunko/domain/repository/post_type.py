"""PostType repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from bunko.domain.model.post_type import PostType
from bunko.domain.value import PostTypeId


class PostTypeRepository(ABC):
    """Repository for PostType entities."""

    @abstractmethod
    async def find_by_id(self, post_type_id: PostTypeId) -> Optional[PostType]:
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[PostType]:
        """Find a post type by its unique name."""
        pass

    @abstractmethod
    async def find_by_names(self, names: Iterable[str]) -> List[PostType]:
        """Find all post types whose name is in ``names``.

        Unknown names are ignored.
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[PostType]:
        pass

    @abstractmethod
    async def save(self, post_type: PostType) -> PostType:
        """Save a post type (create or update)."""
        pass

    @abstractmethod
    async def delete(self, post_type_id: PostTypeId) -> None:
        """Delete a post type.

        Raises:
            BusinessRuleViolationError: If any post still references it
        """
        pass
