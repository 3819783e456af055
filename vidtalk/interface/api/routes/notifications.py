"""Comment notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from vidtalk.application.usecase.common import ApiModel
from vidtalk.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
    NotificationView,
)
from vidtalk.domain.service import JWTService
from vidtalk.interface.api.auth import require_principal
from vidtalk.interface.api.schemas import Envelope, ok

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(ApiModel):
    """API request for marking a notification read."""

    notification_id: str


@router.get("/comments", response_model=Envelope[ListNotificationsResponse])
async def list_notifications(
    request: Request,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
) -> Envelope[ListNotificationsResponse]:
    """List the caller's comment notifications, newest first."""
    principal = require_principal(request, jwt_service, "view notifications")
    result = await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=str(principal.id),
            page=page,
            limit=limit,
            unread_only=unread_only,
        )
    )
    return ok(result)


@router.put("/comments", response_model=Envelope[NotificationView])
async def mark_notification_read(
    body: MarkReadAPIRequest,
    request: Request,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
) -> Envelope[NotificationView]:
    """Mark one of the caller's notifications as read."""
    principal = require_principal(request, jwt_service, "update notifications")
    result = await mark_notification_read_use_case.execute(
        MarkNotificationReadRequest(
            notification_id=body.notification_id, user_id=str(principal.id)
        )
    )
    return ok(result.notification)
