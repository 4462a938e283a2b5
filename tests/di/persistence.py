"""Mock persistence providers for testing."""

from dishka import Scope, provide

from bunko.domain.repository import PostRepository, PostTypeRepository
from bunko.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryPostTypeRepository,
    InMemoryStore,
)
from bunko.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so data written in one request is visible to the
    next, as with a database. Every container gets its own store, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_type_repository(self, store: InMemoryStore) -> PostTypeRepository:
        """Provide in-memory post type repository."""
        return InMemoryPostTypeRepository(store)
