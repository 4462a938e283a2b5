"""PostgreSQL repository implementations."""

from bunko.persistence.repository.post import PostgresPostRepository
from bunko.persistence.repository.post_type import PostgresPostTypeRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresPostTypeRepository",
]
