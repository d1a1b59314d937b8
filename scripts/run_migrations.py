#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c41d9e7a2b0
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from stackit.config import Settings
from stackit.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    """Upgrade the database schema to the requested revision."""
    parser = argparse.ArgumentParser(description="Apply StackIt schema migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--config", default="alembic.ini", help="Alembic config file")
    args = parser.parse_args(argv)

    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=args.revision):
        try:
            command.upgrade(Config(args.config), args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deployment must not start on a half-migrated schema
            raise

    logfire.info("Database migrations applied", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
