"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from vidtalk.domain.model.notification import Notification
from vidtalk.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for comment notifications."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_by_user(
        self,
        user_id: UserId,
        unread_only: bool,
        limit: int,
        offset: int,
    ) -> tuple[list[Notification], int]:
        """Find a user's notifications, newest first.

        Returns:
            Tuple of (notifications on this page, total matching notifications)
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Set the read flag. Marking an already-read notification is a no-op."""
        pass
