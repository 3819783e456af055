"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .notification_service import NotificationService
from .pin_service import PinService
from .thread_service import ThreadService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "JWTService",
    "ModerationService",
    "NotificationService",
    "PinService",
    "Service",
    "ThreadService",
    "VoteService",
]
