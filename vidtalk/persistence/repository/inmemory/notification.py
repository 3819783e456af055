"""In-memory notification repository for testing."""

from typing import Optional

from vidtalk.domain.model.notification import Notification
from vidtalk.domain.repository.notification import NotificationRepository
from vidtalk.domain.value import NotificationId, UserId
from vidtalk.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        self.database.notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self.database.notifications.get(notification_id)

    async def find_by_user(
        self,
        user_id: UserId,
        unread_only: bool,
        limit: int,
        offset: int,
    ) -> tuple[list[Notification], int]:
        """Find a user's notifications, newest first."""
        notifications = [
            n
            for n in self.database.notifications.values()
            if n.user_id == user_id and not (unread_only and n.read)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit], len(notifications)

    async def mark_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Set the read flag."""
        notification = self.database.notifications.get(notification_id)
        if not notification:
            return None
        updated = notification.model_copy(update={"read": True})
        self.database.notifications[notification_id] = updated
        return updated
