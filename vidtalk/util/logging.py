"""Standard library logging, forwarded to Logfire.

Application code logs through ``logfire`` directly. This only captures
records from libraries that use ``logging`` (uvicorn, alembic, asyncpg).
"""

import logging

import logfire

from vidtalk.config import Settings

# Libraries whose INFO output duplicates Logfire's own instrumentation
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire at a level set by ``debug``.

    Call after ``configure_logfire``.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
