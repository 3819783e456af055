"""Repository interfaces for vidtalk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from vidtalk.domain.repository.comment import CommentRepository
from vidtalk.domain.repository.notification import NotificationRepository
from vidtalk.domain.repository.report import ReportRepository
from vidtalk.domain.repository.transaction import TransactionManager
from vidtalk.domain.repository.video import VideoRepository
from vidtalk.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "VoteRepository",
    "ReportRepository",
    "NotificationRepository",
    "VideoRepository",
    "TransactionManager",
]
