"""Domain layer DI providers."""

from dishka import Scope, provide

from bunko.config import ContentSettings
from bunko.domain.registry import ContentRegistry
from bunko.domain.repository import PostRepository, PostTypeRepository
from bunko.domain.service import (
    CollectionService,
    PostService,
    PostTypeService,
    PublicationService,
    SlugService,
    WordCountService,
)
from bunko.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to align with the repository/session
    lifecycle; the registry and settings they read are APP-scoped.
    """

    scope = Scope.REQUEST

    @provide
    def get_slug_service(self, post_repository: PostRepository) -> SlugService:
        return SlugService(post_repository=post_repository)

    @provide
    def get_word_count_service(self, settings: ContentSettings) -> WordCountService:
        return WordCountService(settings=settings)

    @provide
    def get_publication_service(
        self, settings: ContentSettings
    ) -> PublicationService:
        return PublicationService(settings=settings)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        slug_service: SlugService,
        word_count_service: WordCountService,
        publication_service: PublicationService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            slug_service=slug_service,
            word_count_service=word_count_service,
            publication_service=publication_service,
        )

    @provide
    def get_collection_service(
        self,
        registry: ContentRegistry,
        post_repository: PostRepository,
        post_type_repository: PostTypeRepository,
        publication_service: PublicationService,
        settings: ContentSettings,
    ) -> CollectionService:
        """Provide collection query engine."""
        return CollectionService(
            registry=registry,
            post_repository=post_repository,
            post_type_repository=post_type_repository,
            publication_service=publication_service,
            settings=settings,
        )

    @provide
    def get_post_type_service(
        self, registry: ContentRegistry, post_type_repository: PostTypeRepository
    ) -> PostTypeService:
        """Provide post type domain service."""
        return PostTypeService(
            registry=registry, post_type_repository=post_type_repository
        )
