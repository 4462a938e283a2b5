"""Content taxonomy registry.

The registry holds every declared post type and collection. It is filled
once at startup (from settings or programmatically), validated and frozen,
then shared read-only across requests through the DI container.
"""

from typing import Iterable, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from bunko.config import CollectionSettings, PostTypeSettings, Settings
from bunko.domain.error import ConfigurationError
from bunko.domain.model import CollectionDefinition, ListingOptions, PostTypeDefinition
from bunko.domain.value import CollectionScope, Condition, PostTypeName

# Names claimed by the HTTP surface
RESERVED_NAMES = frozenset({"health", "posts", "post_types"})
RESERVED_PATHS = frozenset({"health", "posts", "post-types", "docs-api"})


class ContentRegistry:
    """Declared post types and collections, unique across both namespaces."""

    def __init__(self) -> None:
        self._post_types: dict[str, PostTypeDefinition] = {}
        self._collections: dict[str, CollectionDefinition] = {}
        self._frozen = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentRegistry":
        """Build and freeze a registry from ``settings.content``.

        Raises:
            ConfigurationError: If any declaration is invalid
        """
        registry = cls()
        for post_type in settings.content.post_types:
            registry._declare_post_type_from(post_type)
        for collection in settings.content.collections:
            registry._declare_collection_from(collection)
        return registry.freeze()

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def post_types(self) -> list[PostTypeDefinition]:
        return list(self._post_types.values())

    @property
    def collections(self) -> list[CollectionDefinition]:
        return list(self._collections.values())

    def declare_post_type(
        self,
        name: str,
        title: Optional[str] = None,
        path: Optional[str] = None,
        per_page: Optional[int] = None,
        order: Optional[str] = None,
    ) -> PostTypeDefinition:
        """Declare a post type.

        Args:
            name: Snake-case identifier (e.g. 'blog', 'case_study')
            title: Display title, derived from the name when omitted
            path: URL path segment, the hyphenated name when omitted
            per_page: Listing page size override
            order: Listing order override

        Returns:
            The stored definition

        Raises:
            ConfigurationError: On malformed, reserved or duplicate names
        """
        type_name = self._check_new_name(name, kind="PostType")
        definition = self._build(
            PostTypeDefinition,
            name=type_name,
            title=title or type_name.default_title,
            path=path or type_name.path,
            options=ListingOptions(per_page=per_page, order=order),
        )
        self._check_path_free(definition.path)
        self._post_types[type_name.root] = definition
        logfire.debug("Post type declared", name=type_name.root, path=definition.path)
        return definition

    def declare_collection(
        self,
        name: str,
        post_types: Iterable[str],
        title: Optional[str] = None,
        scope: Optional[CollectionScope] = None,
        path: Optional[str] = None,
        per_page: Optional[int] = None,
        order: Optional[str] = None,
    ) -> CollectionDefinition:
        """Declare a collection spanning one or more post types.

        Member post types may be declared later; they are checked when the
        registry is frozen.

        Raises:
            ConfigurationError: On malformed, reserved or duplicate names, or
                when no post types are given
        """
        collection_name = self._check_new_name(name, kind="Collection")
        members = frozenset(post_types)
        if not members:
            raise ConfigurationError(
                f"Collection '{collection_name.root}' must include "
                "at least one post type"
            )
        for member in members:
            self._parse_name(member)

        definition = self._build(
            CollectionDefinition,
            name=collection_name,
            title=title or collection_name.default_title,
            path=path or collection_name.path,
            options=ListingOptions(per_page=per_page, order=order),
            post_type_names=members,
            scope=scope,
        )
        self._check_path_free(definition.path)
        self._collections[collection_name.root] = definition
        logfire.debug(
            "Collection declared",
            name=collection_name.root,
            post_types=sorted(members),
            scope=scope.name if scope else None,
        )
        return definition

    def find_post_type(self, name: str) -> Optional[PostTypeDefinition]:
        return self._post_types.get(name)

    def find_collection(self, name: str) -> Optional[CollectionDefinition]:
        return self._collections.get(name)

    def find_by_path(
        self, path: str
    ) -> Optional[PostTypeDefinition | CollectionDefinition]:
        """Find the declaration mounted at a URL path segment.

        Post types take precedence over collections.
        """
        for definition in self._post_types.values():
            if definition.path == path:
                return definition
        for definition in self._collections.values():
            if definition.path == path:
                return definition
        return None

    def freeze(self) -> "ContentRegistry":
        """Validate cross references and make the registry read-only.

        Raises:
            ConfigurationError: If a collection references an undeclared post type
        """
        for collection in self._collections.values():
            missing = collection.post_type_names - self._post_types.keys()
            if missing:
                raise ConfigurationError(
                    f"Collection '{collection.name.root}' references undeclared "
                    f"post types: {', '.join(sorted(missing))}"
                )
        self._frozen = True
        logfire.info(
            "Content registry frozen",
            post_types=sorted(self._post_types),
            collections=sorted(self._collections),
        )
        return self

    def _declare_post_type_from(self, config: PostTypeSettings) -> None:
        self.declare_post_type(
            config.name,
            title=config.title,
            path=config.path,
            per_page=config.per_page,
            order=config.order,
        )

    def _declare_collection_from(self, config: CollectionSettings) -> None:
        scope = None
        if config.scope is not None:
            try:
                scope = CollectionScope(
                    name=config.scope.name,
                    conditions=tuple(
                        Condition(field=c.field, op=c.op, value=c.value)
                        for c in config.scope.conditions
                    ),
                )
            except PydanticValidationError as e:
                raise ConfigurationError(
                    f"Invalid scope for collection '{config.name}': {e}"
                ) from e
        self.declare_collection(
            config.name,
            post_types=config.post_types,
            title=config.title,
            scope=scope,
            path=config.path,
            per_page=config.per_page,
            order=config.order,
        )

    def _check_new_name(self, name: str, kind: str) -> PostTypeName:
        if self._frozen:
            raise ConfigurationError(
                f"Cannot declare {kind} '{name}': registry is frozen"
            )
        parsed = self._parse_name(name)
        if parsed.root in RESERVED_NAMES:
            raise ConfigurationError(f"{kind} name '{name}' is reserved")
        if parsed.root in self._post_types:
            if kind == "PostType":
                raise ConfigurationError(f"PostType '{name}' already exists")
            raise ConfigurationError(
                f"{kind} '{name}' conflicts with existing PostType '{name}'"
            )
        if parsed.root in self._collections:
            if kind == "Collection":
                raise ConfigurationError(f"Collection '{name}' already exists")
            raise ConfigurationError(
                f"{kind} '{name}' conflicts with existing collection '{name}'"
            )
        # Lookup matches names before paths, so a name may not shadow a path
        mounted = self.find_by_path(parsed.root)
        if mounted is not None:
            raise ConfigurationError(
                f"{kind} name '{name}' conflicts with the path of "
                f"'{mounted.name.root}'"
            )
        return parsed

    def _check_path_free(self, path: str) -> None:
        if path in RESERVED_PATHS:
            raise ConfigurationError(f"Path '{path}' is reserved")
        if self.find_by_path(path) is not None:
            raise ConfigurationError(f"Path '{path}' is already in use")
        if path in self._post_types or path in self._collections:
            raise ConfigurationError(
                f"Path '{path}' conflicts with the name of an existing declaration"
            )

    @staticmethod
    def _parse_name(name: str) -> PostTypeName:
        try:
            return PostTypeName(name)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid name '{name}': use lowercase letters, digits and underscores"
            ) from e

    @staticmethod
    def _build(model, **fields):
        try:
            return model(**fields)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid declaration '{fields.get('name')}': {e}"
            ) from e
