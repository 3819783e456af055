"""Notification entity."""

from datetime import datetime

from pydantic import Field

from vidtalk.domain.model.common import DomainModel
from vidtalk.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """A notification addressed to ``user_id`` about ``comment_id``.

    For replies, ``comment_id`` is the reply itself. For pins it is the
    pinned comment.
    """

    id: NotificationId
    user_id: UserId
    comment_id: CommentId
    type: NotificationType
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
