"""Standard-library logging routed into Logfire."""

import logging

import logfire

from atelier.config import Settings

LIBRARY_LEVELS = {
    "asyncio": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "alembic": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Forward uvicorn, SQLAlchemy and Alembic records to Logfire.

    Must run after ``configure_logfire`` so records share its console and
    export settings. SQL statements are only logged in debug mode.
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level, handlers=[logfire.LogfireLoggingHandler()], force=True
    )

    for name, library_level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logfire.debug("Logging routed to Logfire", level=logging.getLevelName(level))
