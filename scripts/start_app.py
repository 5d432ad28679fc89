#!/usr/bin/env python3
"""Run the Explora API under uvicorn.

Logging and Logfire are configured before the app module is imported so
that a broken catalog file or bad setting is reported, not just printed.
"""

import sys

import logfire
import uvicorn

from explora.config import Settings
from explora.util.logging import setup_logging
from explora.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Explora API",
        port=settings.api.port,
        city_id=settings.catalog.city_id,
    )
    try:
        uvicorn.run(
            "explora.interface.api.app:app",
            host="0.0.0.0",
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.exception("Explora API failed to start", error_type=type(e).__name__)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
