"""Logfire setup for the API process and its scripts.

Services log and trace through the logfire module directly::

    with logfire.span("ledger_service.toggle_like", liker_id=str(liker_id)):
        logfire.info("Like recorded", content_id=str(content_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from atelier.config import (
    SERVICE_NAME,
    SERVICE_VERSION,
    ObservabilitySettings,
    Settings,
)

UNTRACED_PATHS = ["/health"]


def should_send(observability: ObservabilitySettings) -> bool:
    """Decide whether spans leave the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    turns exporting on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start."""
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except the /health endpoint."""

    def _request_attributes(request, attributes):
        client = getattr(request, "client", None)
        return {
            **attributes,
            "method": request.method,
            "path": request.url.path,
            "client_host": client.host if client else None,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_PATHS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the SQL statements issued by the repositories."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
