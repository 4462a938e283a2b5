"""Dependency injection module."""

from typing import Type

from bunko.util.di.application import ProdApplicationProvider
from bunko.util.di.base import Component, ProviderBase
from bunko.util.di.core import ProdConfigProvider, RegistryProvider
from bunko.util.di.domain import ProdDomainProvider
from bunko.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Providers instantiated without arguments. The registry provider is added
# separately by the container builders since it may carry a registry.
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for ``base``.

    A base without subclasses is concrete and used as-is. A base with
    subclasses is a mockable component; the implementation is selected by
    its ``__is_mock__`` flag.

    Raises:
        ValueError: If the requested implementation is not found
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )
    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "RegistryProvider",
]
