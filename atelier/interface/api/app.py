"""FastAPI application for the Atelier engagement API."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from atelier.config import SERVICE_VERSION, Settings
from atelier.interface.api.errors import register_error_handlers
from atelier.interface.api.routes import accounts, content, health, notifications
from atelier.util.di.container import create_container
from atelier.util.observability import instrument_fastapi

ROUTERS = (health, accounts, content, notifications)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API around a DI container.

    Logfire is expected to be configured already: ``scripts/start_app.py``
    does it for the server and ``tests/conftest.py`` for the test suites,
    which also pass their own container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Atelier API",
        description=(
            "Likes, follows, comments and notifications for artists and musicians"
        ),
        version=SERVICE_VERSION,
    )
    instrument_fastapi(app_instance)

    # The frontend authenticates with the auth_token cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_dishka(container or create_container(), app_instance)
    register_error_handlers(app_instance)

    for module in ROUTERS:
        app_instance.include_router(module.router)

    return app_instance


app = create_app()
