#!/usr/bin/env python3
"""Upgrade the database schema, tracing the run in Logfire.

Usage: ``python scripts/run_migrations.py [revision]`` (defaults to head).
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from atelier.config import Settings
from atelier.util.logging import setup_logging
from atelier.util.observability import configure_logfire

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def build_alembic_config() -> Config:
    """Load alembic.ini from the project root regardless of working directory."""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.attributes["configure_logger"] = False
    return config


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    # A failing upgrade is recorded on the span and re-raised
    with logfire.span(
        "migrations.upgrade", revision=revision, environment=settings.environment
    ):
        command.upgrade(build_alembic_config(), revision)

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
