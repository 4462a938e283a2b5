"""Repository interfaces (ports) for content persistence."""

from bunko.domain.repository.post import PostRepository
from bunko.domain.repository.post_type import PostTypeRepository

__all__ = [
    "PostRepository",
    "PostTypeRepository",
]
