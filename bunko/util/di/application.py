"""Application layer DI providers."""

from dishka import Scope, provide

from bunko.application.usecase.collection import (
    GetCollectionPostUseCase,
    ListCollectionUseCase,
)
from bunko.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from bunko.application.usecase.post_type import (
    DeletePostTypeUseCase,
    ListPostTypesUseCase,
    SyncPostTypesUseCase,
)
from bunko.config import ContentSettings
from bunko.domain.repository import PostTypeRepository
from bunko.domain.service import (
    CollectionService,
    PostService,
    PostTypeService,
    PublicationService,
    WordCountService,
)
from bunko.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            post_type_repository=post_type_repository,
            word_count_service=word_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            post_type_repository=post_type_repository,
            word_count_service=word_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            post_type_repository=post_type_repository,
            word_count_service=word_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        collection_service: CollectionService,
        publication_service: PublicationService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
        settings: ContentSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            collection_service=collection_service,
            publication_service=publication_service,
            post_type_repository=post_type_repository,
            word_count_service=word_count_service,
            settings=settings,
        )

    # Collection use cases
    @provide(scope=Scope.REQUEST)
    def get_list_collection_use_case(
        self,
        collection_service: CollectionService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> ListCollectionUseCase:
        """Provide list collection use case."""
        return ListCollectionUseCase(
            collection_service=collection_service,
            post_type_repository=post_type_repository,
            word_count_service=word_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_collection_post_use_case(
        self,
        collection_service: CollectionService,
        post_type_repository: PostTypeRepository,
        word_count_service: WordCountService,
    ) -> GetCollectionPostUseCase:
        """Provide get collection post use case."""
        return GetCollectionPostUseCase(
            collection_service=collection_service,
            post_type_repository=post_type_repository,
            word_count_service=word_count_service,
        )

    # PostType use cases
    @provide(scope=Scope.REQUEST)
    def get_sync_post_types_use_case(
        self, post_type_service: PostTypeService
    ) -> SyncPostTypesUseCase:
        """Provide sync post types use case."""
        return SyncPostTypesUseCase(post_type_service=post_type_service)

    @provide(scope=Scope.REQUEST)
    def get_list_post_types_use_case(
        self, post_type_service: PostTypeService
    ) -> ListPostTypesUseCase:
        """Provide list post types use case."""
        return ListPostTypesUseCase(post_type_service=post_type_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_type_use_case(
        self, post_type_service: PostTypeService
    ) -> DeletePostTypeUseCase:
        """Provide delete post type use case."""
        return DeletePostTypeUseCase(post_type_service=post_type_service)
