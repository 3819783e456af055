"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .notification import InMemoryNotificationRepository
from .report import InMemoryReportRepository
from .transaction import InMemoryTransactionManager
from .video import InMemoryVideoRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryNotificationRepository",
    "InMemoryReportRepository",
    "InMemoryTransactionManager",
    "InMemoryVideoRepository",
    "InMemoryVoteRepository",
]
