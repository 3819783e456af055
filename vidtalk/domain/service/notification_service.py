"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from vidtalk.config import CommentSettings
from vidtalk.domain.error import NotAuthorizedError, NotFoundError
from vidtalk.domain.model import Comment, Notification, Page, Pagination
from vidtalk.domain.repository import NotificationRepository
from vidtalk.domain.value import NotificationId, NotificationType, UserId

from .base import Service, page_window


class NotificationService(Service):
    """Domain service for comment notifications.

    Notifications are written in the same unit of work as the event that
    caused them and are read by polling.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            comment_settings: Page size limits
        """
        self.notification_repository = notification_repository
        self.comment_settings = comment_settings

    async def notify_reply(self, reply: Comment, parent: Comment) -> Notification:
        """Tell the parent's author that someone replied.

        Callers only invoke this when the reply and parent authors differ.

        Args:
            reply: The newly created reply
            parent: The top-level comment that was replied to

        Returns:
            Created notification
        """
        with logfire.span(
            "notification_service.notify_reply",
            reply_id=str(reply.id),
            parent_id=str(parent.id),
        ):
            notification = await self.notification_repository.save(
                Notification(
                    id=NotificationId(uuid4()),
                    user_id=parent.author_id,
                    comment_id=reply.id,
                    type=NotificationType.REPLY,
                    read=False,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Reply notification created",
                notification_id=str(notification.id),
                recipient_id=str(parent.author_id),
            )
            return notification

    async def notify_pinned(self, comment: Comment, pinned_by: UserId) -> Notification:
        """Tell a comment's author that the channel owner pinned it.

        Args:
            comment: The pinned comment
            pinned_by: The owner who pinned it

        Returns:
            Created notification
        """
        with logfire.span(
            "notification_service.notify_pinned",
            comment_id=str(comment.id),
            pinned_by=str(pinned_by),
        ):
            notification = await self.notification_repository.save(
                Notification(
                    id=NotificationId(uuid4()),
                    user_id=comment.author_id,
                    comment_id=comment.id,
                    type=NotificationType.PINNED,
                    read=False,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Pin notification created",
                notification_id=str(notification.id),
                recipient_id=str(comment.author_id),
            )
            return notification

    async def list_notifications(
        self,
        user_id: UserId,
        page: int = 1,
        limit: int | None = None,
        unread_only: bool = False,
    ) -> Page[Notification]:
        """List a user's notifications, newest first.

        Args:
            user_id: Recipient
            page: 1-based page number
            limit: Page size (defaults to the configured page size)
            unread_only: Only return unread notifications

        Returns:
            One page of notifications
        """
        with logfire.span(
            "notification_service.list_notifications",
            user_id=str(user_id),
            page=page,
            unread_only=unread_only,
        ):
            limit, offset = page_window(
                page,
                limit or self.comment_settings.default_page_size,
                self.comment_settings,
            )
            items, total = await self.notification_repository.find_by_user(
                user_id=user_id,
                unread_only=unread_only,
                limit=limit,
                offset=offset,
            )
            logfire.info(
                "Notifications retrieved",
                user_id=str(user_id),
                count=len(items),
                total=total,
            )
            return Page[Notification](
                items=items,
                pagination=Pagination(page=page, limit=limit, total=total),
            )

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark a notification as read. Repeated calls are harmless.

        Args:
            notification_id: Notification to mark
            user_id: Caller, who must be the recipient

        Returns:
            The notification with ``read`` set

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification:
                logfire.warn(
                    "Notification not found", notification_id=str(notification_id)
                )
                raise NotFoundError("Notification", str(notification_id))

            if notification.user_id != user_id:
                logfire.warn(
                    "Mark read on another user's notification",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "read", "notification", str(notification_id), str(user_id)
                )

            if notification.read:
                return notification

            updated = await self.notification_repository.mark_read(notification_id)
            if not updated:
                raise NotFoundError("Notification", str(notification_id))
            logfire.info("Notification marked read", notification_id=str(notification_id))
            return updated
