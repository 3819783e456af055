"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel

from vidtalk.application.usecase.common import ApiModel, PaginationView, parse_id
from vidtalk.domain.model import Notification
from vidtalk.domain.service import NotificationService
from vidtalk.domain.value import NotificationType, UserId


class NotificationView(ApiModel):
    """A notification as returned to clients."""

    id: str
    comment_id: str
    type: NotificationType
    read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        return cls(
            id=str(notification.id),
            comment_id=str(notification.comment_id),
            type=notification.type,
            read=notification.read,
            created_at=notification.created_at,
        )


class NotificationPaginationView(PaginationView):
    """Pagination metadata with a has-more flag."""

    has_more: bool


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str
    page: int = 1
    limit: int | None = None
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationView]
    pagination: NotificationPaginationView


class ListNotificationsUseCase:
    """Use case for polling a user's comment notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        result = await self.notification_service.list_notifications(
            user_id=UserId(parse_id(request.user_id, "User")),
            page=request.page,
            limit=request.limit,
            unread_only=request.unread_only,
        )
        pagination = result.pagination
        return ListNotificationsResponse(
            notifications=[
                NotificationView.from_notification(n) for n in result.items
            ],
            pagination=NotificationPaginationView(
                page=pagination.page,
                limit=pagination.limit,
                total=pagination.total,
                pages=pagination.pages,
                has_more=pagination.has_more,
            ),
        )
