"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .post_type import InMemoryPostTypeRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryPostRepository",
    "InMemoryPostTypeRepository",
    "InMemoryStore",
]
