"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.model import Comment
from vidtalk.domain.repository import CommentRepository
from vidtalk.domain.value import (
    CommentId,
    CommentSortOrder,
    CommentStatus,
    UserId,
    VideoId,
)
from vidtalk.persistence.mappers import comment_to_dict, row_to_comment
from vidtalk.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _update(self, comment_id: CommentId, **values) -> Optional[Comment]:
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**values)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments at once."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def lock(self, comment_id: CommentId) -> Optional[Comment]:
        """Load a comment with SELECT ... FOR UPDATE."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        return row_to_comment(result.fetchone()._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Replace content and bump updated_at."""
        return await self._update(comment_id, content=content, updated_at=updated_at)

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change status without touching updated_at."""
        return await self._update(comment_id, status=status.value)

    async def set_vote_counts(
        self, comment_id: CommentId, like_count: int, dislike_count: int
    ) -> Optional[Comment]:
        """Write cached vote counters."""
        return await self._update(
            comment_id, like_count=like_count, dislike_count=dislike_count
        )

    async def set_reply_count(
        self, comment_id: CommentId, reply_count: int
    ) -> Optional[Comment]:
        """Write cached reply counter."""
        return await self._update(comment_id, reply_count=reply_count)

    async def count_children(
        self,
        parent_id: CommentId,
        statuses: Sequence[CommentStatus] = (CommentStatus.ACTIVE,),
    ) -> int:
        """Count direct replies in the given statuses."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.status.in_([s.value for s in statuses]))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def clear_pins(self, video_id: VideoId) -> int:
        """Unpin all pinned top-level comments on a video."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.video_id == video_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.pinned.is_(True))
            .values(pinned=False, pinned_at=None, pinned_by=None)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def set_pin(
        self, comment_id: CommentId, pinned_by: UserId, pinned_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as pinned."""
        return await self._update(
            comment_id, pinned=True, pinned_at=pinned_at, pinned_by=pinned_by
        )

    async def clear_pin(self, comment_id: CommentId) -> Optional[Comment]:
        """Clear one comment's pin."""
        return await self._update(
            comment_id, pinned=False, pinned_at=None, pinned_by=None
        )

    async def find_top_level(
        self,
        video_id: VideoId,
        statuses: Sequence[CommentStatus],
        sort: CommentSortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[Comment], int]:
        """Find a page of top-level comments, pinned first.

        Uses a window count so rows and total come from one query.
        """
        status_values = [s.value for s in statuses]
        stmt = (
            select(comments_table, func.count().over().label("total_count"))
            .where(comments_table.c.video_id == video_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status.in_(status_values))
        )

        # Pinned comment always first
        order_by = [comments_table.c.pinned.desc()]
        if sort == CommentSortOrder.OLDEST:
            order_by.append(comments_table.c.created_at.asc())
        elif sort == CommentSortOrder.TOP:
            order_by.append(
                (comments_table.c.like_count - comments_table.c.dislike_count).desc()
            )
            order_by.append(comments_table.c.created_at.desc())
        else:
            order_by.append(comments_table.c.created_at.desc())
        # Stable paging across equal timestamps
        order_by.append(comments_table.c.id)

        stmt = stmt.order_by(*order_by).limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]

        if rows:
            return [row_to_comment(row) for row in rows], rows[0]["total_count"]

        # Page past the end: the window yields no rows, count separately
        count_stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.video_id == video_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.status.in_(status_values))
        )
        count_result = await self.session.execute(count_stmt)
        return [], count_result.scalar() or 0

    async def find_replies(
        self,
        parent_ids: Sequence[CommentId],
        statuses: Sequence[CommentStatus] = (CommentStatus.ACTIVE,),
    ) -> list[Comment]:
        """Find replies of several parents, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .where(comments_table.c.status.in_([s.value for s in statuses]))
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]
