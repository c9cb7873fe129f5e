#!/usr/bin/env python3
"""Apply Alembic migrations to the configured threads database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a2b7d40
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from threads.config import Settings
from threads.util.logging import setup_logging
from threads.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision (default: head)."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    if not settings.database_url:
        logfire.error("Cannot run migrations: DATABASE__URL is not set")
        return 1

    try:
        with logfire.span("migrations.upgrade", target=target):
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
