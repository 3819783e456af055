"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from vidtalk.domain.model import Comment, Notification, Report, Video, Vote
from vidtalk.domain.value import (
    ChannelId,
    CommentId,
    CommentStatus,
    NotificationId,
    NotificationType,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
    VideoId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> Optional[UUID]:
    """Normalise a UUID column value (drivers may hand back strings)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_video(row: Dict[str, Any]) -> Video:
    """Convert database row to Video domain model."""
    return Video(
        id=VideoId(_uuid(row["id"])),
        channel_id=ChannelId(_uuid(row["channel_id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        title=row.get("title") or "",
        comment_count=row.get("comment_count", 0),
    )


def video_to_dict(video: Video) -> Dict[str, Any]:
    """Convert Video domain model to database dict."""
    return video.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    pinned_by = _uuid(row.get("pinned_by"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        video_id=VideoId(_uuid(row["video_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_display_name=row["author_display_name"],
        author_avatar_url=row.get("author_avatar_url"),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        status=CommentStatus(row["status"]),
        like_count=row["like_count"],
        dislike_count=row["dislike_count"],
        reply_count=row["reply_count"],
        pinned=row["pinned"],
        pinned_at=row.get("pinned_at"),
        pinned_by=UserId(pinned_by) if pinned_by else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=VoteType(row["type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["type"] = vote.type.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=ReportReason(row["reason"]),
        description=row.get("description"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict."""
    data = report.model_dump()
    data["reason"] = report.reason.value
    data["status"] = report.status.value
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        type=NotificationType(row["type"]),
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
