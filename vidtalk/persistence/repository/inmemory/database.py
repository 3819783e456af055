"""Shared in-memory store for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from vidtalk.domain.model import Comment, Notification, Report, Video, Vote
from vidtalk.domain.value import (
    CommentId,
    NotificationId,
    ReportId,
    UserId,
    VideoId,
)

_TABLES = ("videos", "comments", "votes", "reports", "notifications")


class InMemoryDatabase:
    """Process-local tables shared by the in-memory repositories.

    One instance lives for the whole container so that writes made in one
    request are visible to the next. ``unit()`` serializes atomic units on
    an asyncio.Lock and restores a snapshot when a unit fails, which gives
    the same all-or-nothing behaviour as a database savepoint.
    """

    def __init__(self) -> None:
        self.videos: dict[VideoId, Video] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.votes: dict[tuple[CommentId, UserId], Vote] = {}
        self.reports: dict[ReportId, Report] = {}
        self.notifications: dict[NotificationId, Notification] = {}
        self._lock = asyncio.Lock()
        self._owner: asyncio.Task | None = None

    def snapshot(self) -> dict[str, dict[Any, Any]]:
        # Models are frozen, so shallow copies are enough
        return {name: dict(getattr(self, name)) for name in _TABLES}

    def restore(self, snapshot: dict[str, dict[Any, Any]]) -> None:
        for name, rows in snapshot.items():
            table = getattr(self, name)
            table.clear()
            table.update(rows)

    @asynccontextmanager
    async def unit(self) -> AsyncIterator[None]:
        """Run an atomic unit. Units opened by the owning task nest freely."""
        task = asyncio.current_task()
        if self._owner is not None and self._owner is task:
            snapshot = self.snapshot()
            try:
                yield
            except BaseException:
                self.restore(snapshot)
                raise
            return

        async with self._lock:
            self._owner = task
            snapshot = self.snapshot()
            try:
                yield
            except BaseException:
                self.restore(snapshot)
                raise
            finally:
                self._owner = None
