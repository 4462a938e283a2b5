"""Test container builder with selective unmocking."""

from typing import Optional

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from bunko.domain.registry import ContentRegistry
from bunko.util.di import PROVIDERS, Component, RegistryProvider, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    registry: Optional[ContentRegistry] = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for. All
            others use mocks if available.
        registry: Content registry to provide

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container(registry=make_registry())

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        use_mock = bool(base.__subclasses__()) and component_name not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(
        *provider_instances, RegistryProvider(registry), FastapiProvider()
    )


def _validate_unmock(unmock: set[Component]) -> None:
    mockable = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if p.__subclasses__() and getattr(p, "__mock_component__", None)
    }
    unknown = unmock - mockable
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
