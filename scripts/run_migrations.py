#!/usr/bin/env python3
"""Apply Alembic migrations before the API starts.

Usage:
    python scripts/run_migrations.py                      # upgrade to head
    python scripts/run_migrations.py upgrade <revision>
    python scripts/run_migrations.py downgrade <revision>
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from circle.config import Settings
from circle.util.logging import setup_logging
from circle.util.observability import configure_logfire

COMMANDS = {"upgrade": command.upgrade, "downgrade": command.downgrade}


def main(argv: list[str]) -> int:
    """Migrate the schema and report failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    action = argv[1] if len(argv) > 1 else "upgrade"
    target = argv[2] if len(argv) > 2 else "head"
    if action not in COMMANDS:
        logfire.error("Unknown migration command", command=action)
        return 2

    with logfire.span("migrations.run", command=action, target=target):
        try:
            COMMANDS[action](Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                command=action,
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container does not start on a broken schema
            raise

    logfire.info("Database migrations completed", command=action, target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
