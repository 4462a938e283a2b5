"""Observability configuration using Logfire.

Services and repositories emit spans and structured events directly:

    import logfire

    with logfire.span("post_service.save_post", post_id=str(post.id)):
        logfire.info("Post saved", slug=post.slug)

This module configures the SDK once per process and instruments FastAPI
and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from bunko.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the environment.

    Telemetry is sent to Logfire cloud when
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so, or otherwise when
    ``OBSERVABILITY__LOGFIRE_TOKEN`` is set. Without either, output is
    console-only.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    config_kwargs = {
        "service_name": "bunko",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request with method, path and client host."""

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if getattr(request, "client", None):
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries of an async engine."""
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # SQL comments carry the span context
    )
    logfire.info("SQLAlchemy instrumented")
