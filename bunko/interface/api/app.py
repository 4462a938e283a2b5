"""FastAPI application."""

from typing import Optional

from fastapi import FastAPI

from bunko.config import Settings
from bunko.domain.registry import ContentRegistry
from bunko.interface.api.routes import collections, health, post_types, posts
from bunko.util.di.container import create_container, setup_di
from bunko.util.observability import instrument_fastapi


def create_app(registry: Optional[ContentRegistry] = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does this in production and tests/conftest.py in tests.

    Args:
        registry: Content registry declared in code. When omitted the
            registry is built from ``CONTENT__POST_TYPES`` and
            ``CONTENT__COLLECTIONS``.
    """
    app_instance = FastAPI(
        title="Bunko API",
        description="Content engine: post types, collections and publishing",
        version="0.1.0",
        # /docs would shadow a collection mounted at "docs"
        docs_url="/docs-api",
        redoc_url=None,
    )

    instrument_fastapi(app_instance)

    # Built eagerly so a misconfigured taxonomy aborts startup
    if registry is None:
        registry = ContentRegistry.from_settings(Settings())
    container = create_container(registry)
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(post_types.router)
    # Catch-all collection paths go last
    app_instance.include_router(collections.router)

    return app_instance
