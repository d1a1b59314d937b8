#!/usr/bin/env python3
"""Run the StackIt API under uvicorn.

Logfire is configured before uvicorn imports the application so that
import and startup failures are reported too.
"""

import sys
import logfire
import uvicorn

from stackit.config import Settings
from stackit.util.observability import configure_logfire

APP_FACTORY = "stackit.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info("Starting StackIt API", host=settings.api.host, port=settings.api.port)
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "StackIt API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
