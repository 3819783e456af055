"""Mark notification read use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import parse_id
from vidtalk.application.usecase.notification.list_notifications import (
    NotificationView,
)
from vidtalk.domain.service import NotificationService
from vidtalk.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # Must be the recipient


class MarkNotificationReadResponse(BaseModel):
    """Mark notification read response."""

    notification: NotificationView


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Mark the notification read. Repeating the call is harmless.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to someone else
        """
        notification = await self.notification_service.mark_read(
            NotificationId(parse_id(request.notification_id, "Notification")),
            UserId(parse_id(request.user_id, "User")),
        )
        return MarkNotificationReadResponse(
            notification=NotificationView.from_notification(notification)
        )
