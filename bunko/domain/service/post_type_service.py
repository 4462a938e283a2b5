"""PostType domain service."""

from uuid import uuid4

import logfire

from bunko.domain.error import NotFoundError
from bunko.domain.model import PostType
from bunko.domain.registry import ContentRegistry
from bunko.domain.repository import PostTypeRepository
from bunko.domain.value import PostTypeId, utc_now

from .base import Service


class PostTypeService(Service):
    """Keeps PostType rows in step with the registry."""

    def __init__(
        self, registry: ContentRegistry, post_type_repository: PostTypeRepository
    ) -> None:
        """Initialize post type service.

        Args:
            registry: Declared post types
            post_type_repository: PostType repository
        """
        self.registry = registry
        self.post_type_repository = post_type_repository

    async def list_post_types(self) -> list[PostType]:
        return await self.post_type_repository.find_all()

    async def sync_from_registry(self) -> list[PostType]:
        """Create missing PostType rows and refresh changed titles.

        Rows for post types no longer declared are left alone; removing them
        is an explicit ``delete_post_type``.

        Returns:
            The PostType rows for every declared post type
        """
        with logfire.span(
            "post_type_service.sync_from_registry",
            declared=len(self.registry.post_types),
        ):
            synced = []
            for definition in self.registry.post_types:
                existing = await self.post_type_repository.find_by_name(
                    definition.name.root
                )
                if existing is None:
                    post_type = PostType(
                        id=PostTypeId(uuid4()),
                        name=definition.name,
                        title=definition.title,
                    )
                    logfire.info("Creating post type", name=definition.name.root)
                elif existing.title != definition.title:
                    post_type = existing.model_copy(
                        update={"title": definition.title, "updated_at": utc_now()}
                    )
                    logfire.info(
                        "Updating post type title",
                        name=definition.name.root,
                        title=definition.title,
                    )
                else:
                    synced.append(existing)
                    continue
                synced.append(await self.post_type_repository.save(post_type))

            return synced

    async def delete_post_type(self, name: str) -> None:
        """Delete a PostType row by name.

        Raises:
            NotFoundError: If no such post type exists
            BusinessRuleViolationError: If posts still reference it
        """
        with logfire.span("post_type_service.delete_post_type", name=name):
            post_type = await self.post_type_repository.find_by_name(name)
            if post_type is None:
                raise NotFoundError("PostType", name)
            await self.post_type_repository.delete(post_type.id)
            logfire.info("Post type deleted", name=name)
