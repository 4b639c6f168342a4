#!/usr/bin/env python3
"""Apply comment streams schema migrations.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``. Failures are reported to Logfire before the
process exits so a deployment never starts on a half-migrated schema.
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from commentstreams.config import Settings
from commentstreams.util.logging import setup_logging
from commentstreams.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Schema migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Schema migrated", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
