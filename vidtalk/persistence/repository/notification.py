"""PostgreSQL implementation of Notification repository."""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.model import Notification
from vidtalk.domain.repository import NotificationRepository
from vidtalk.domain.value import NotificationId, UserId
from vidtalk.persistence.mappers import notification_to_dict, row_to_notification
from vidtalk.persistence.tables import comment_notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = (
            comment_notifications_table.insert()
            .values(**notification_to_dict(notification))
            .returning(comment_notifications_table)
        )
        result = await self.session.execute(stmt)
        return row_to_notification(result.fetchone()._asdict())

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(comment_notifications_table).where(
            comment_notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_user(
        self,
        user_id: UserId,
        unread_only: bool,
        limit: int,
        offset: int,
    ) -> tuple[list[Notification], int]:
        """Find a user's notifications, newest first."""
        table = comment_notifications_table
        conditions = [table.c.user_id == user_id]
        if unread_only:
            conditions.append(table.c.read.is_(False))

        stmt = (
            select(table, func.count().over().label("total_count"))
            .where(*conditions)
            .order_by(table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        if rows:
            return [row_to_notification(row) for row in rows], rows[0]["total_count"]

        count_stmt = select(func.count()).select_from(table).where(*conditions)
        count_result = await self.session.execute(count_stmt)
        return [], count_result.scalar() or 0

    async def mark_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Set the read flag."""
        stmt = (
            update(comment_notifications_table)
            .where(comment_notifications_table.c.id == notification_id)
            .values(read=True)
            .returning(comment_notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None
