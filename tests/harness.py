"""Test harness for unit, integration and E2E tests.

Integration tests that unmock persistence assume PostgreSQL is running and
migrated, with ``DATABASE__URL`` pointing at it.
"""

from typing import Optional

import pytest_asyncio

from bunko.domain.registry import ContentRegistry
from bunko.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None,
    registry: Optional[ContentRegistry] = None,
):
    """Factory for test environment fixtures.

    The fixture builds a test container and yields a request-scoped
    container for service access. Each test gets a fresh container, so
    in-memory data never leaks between tests.

    Args:
        unmock: Components to use real implementations for
        registry: Content registry to serve; built from settings when omitted

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture(registry=make_registry())

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            post_service = await unit_env.get(PostService)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set(), registry=registry)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
