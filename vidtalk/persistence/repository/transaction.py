"""PostgreSQL unit-of-work scopes backed by SAVEPOINTs."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.error import ConcurrencyConflictError
from vidtalk.domain.repository import TransactionManager

# serialization_failure, deadlock_detected
_RETRYABLE_SQLSTATES = {"40001", "40P01"}
_UNIQUE_VIOLATION = "23505"
_PIN_INDEX = "uq_comments_video_pinned"


def _sqlstate(error: DBAPIError) -> str | None:
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code
    # asyncpg's own exception sits behind SQLAlchemy's adapter
    return getattr(getattr(orig, "__cause__", None), "sqlstate", None)


def is_conflict(error: DBAPIError) -> bool:
    """Whether a database error means a concurrent writer won the race."""
    code = _sqlstate(error)
    if code in _RETRYABLE_SQLSTATES:
        return True
    return code == _UNIQUE_VIOLATION and _PIN_INDEX in str(error.orig)


class PostgresTransactionManager(TransactionManager):
    """Runs each unit inside ``session.begin_nested()``.

    The request-level transaction is owned by the session provider; a
    failing unit only rolls back to its savepoint.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        try:
            async with self.session.begin_nested():
                yield
        except DBAPIError as e:
            if is_conflict(e):
                logfire.warn("Write conflict detected", sqlstate=_sqlstate(e))
                raise ConcurrencyConflictError(str(e.orig)) from e
            raise
