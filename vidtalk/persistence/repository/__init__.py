"""PostgreSQL repository implementations."""

from vidtalk.persistence.repository.comment import PostgresCommentRepository
from vidtalk.persistence.repository.notification import PostgresNotificationRepository
from vidtalk.persistence.repository.report import PostgresReportRepository
from vidtalk.persistence.repository.transaction import PostgresTransactionManager
from vidtalk.persistence.repository.video import PostgresVideoRepository
from vidtalk.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresReportRepository",
    "PostgresTransactionManager",
    "PostgresVideoRepository",
    "PostgresVoteRepository",
]
