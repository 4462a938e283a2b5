"""Core DI providers (non-mockable)."""

from typing import Optional

from dishka import Scope, provide

from bunko.config import ContentSettings, Settings
from bunko.domain.registry import ContentRegistry
from bunko.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from environment variables and the .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        return settings.content


class RegistryProvider(ProviderBase):
    """Provides the frozen content registry for the whole process.

    A registry built in code can be passed in; otherwise it is built from
    ``settings.content`` on first use.
    """

    def __init__(self, registry: Optional[ContentRegistry] = None) -> None:
        super().__init__()
        self._registry = registry

    @provide(scope=Scope.APP)
    def provide_registry(self, settings: Settings) -> ContentRegistry:
        if self._registry is not None:
            if not self._registry.frozen:
                self._registry.freeze()
            return self._registry
        return ContentRegistry.from_settings(settings)
