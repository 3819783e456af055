#!/usr/bin/env python3
"""Apply the comment engine schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f7a9e2b40
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from vidtalk.config import Settings
from vidtalk.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the database to ``argv[0]`` (default ``head``)."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    alembic_cfg = Config(str(ALEMBIC_INI))

    with logfire.span(
        "migrations.upgrade",
        revision=revision,
        environment=settings.environment,
    ):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Comment schema migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Comment schema is up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
