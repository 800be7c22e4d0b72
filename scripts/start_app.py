#!/usr/bin/env python3
"""Serve the Atelier API with uvicorn."""

import sys

import logfire
import uvicorn

from atelier.config import Settings
from atelier.util.logging import setup_logging
from atelier.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    # Before the app import so startup failures are reported
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting Atelier API",
        base_url=settings.api.base_url,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "atelier.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_config=None,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Atelier API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
