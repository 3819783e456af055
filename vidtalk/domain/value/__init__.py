"""Domain value objects for vidtalk."""

from vidtalk.domain.value.identifiers import (
    ChannelId,
    CommentId,
    NotificationId,
    ReportId,
    UserId,
    VideoId,
    VoteId,
)
from vidtalk.domain.value.types import (
    CommentSortOrder,
    CommentStatus,
    ModerationAction,
    NotificationType,
    Principal,
    ReportReason,
    ReportStatus,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "VideoId",
    "ChannelId",
    "CommentId",
    "VoteId",
    "ReportId",
    "NotificationId",
    # Types
    "CommentStatus",
    "VoteType",
    "CommentSortOrder",
    "ModerationAction",
    "ReportReason",
    "ReportStatus",
    "NotificationType",
    "Principal",
]
