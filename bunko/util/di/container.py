"""Dependency injection container."""

from typing import Optional

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from bunko.domain.registry import ContentRegistry
from bunko.util.di import PROVIDERS, RegistryProvider, get_provider


def create_container(registry: Optional[ContentRegistry] = None) -> AsyncContainer:
    """Build the production container.

    Args:
        registry: Registry declared in code; built from settings when omitted

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances, RegistryProvider(registry), FastapiProvider()
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI application."""
    setup_dishka(container, app)
