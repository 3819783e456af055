"""PostgreSQL implementation of Vote repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.model import Vote
from vidtalk.domain.repository import VoteRepository
from vidtalk.domain.value import CommentId, UserId, VoteType
from vidtalk.persistence.mappers import row_to_vote, vote_to_dict
from vidtalk.persistence.tables import comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(comment_votes_table).where(
            comment_votes_table.c.user_id == user_id,
            comment_votes_table.c.comment_id == comment_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the existing vote's type."""
        values = vote_to_dict(vote)
        stmt = (
            insert(comment_votes_table)
            .values(**values)
            .on_conflict_do_update(
                constraint="uq_comment_vote",
                set_={"type": values["type"], "created_at": values["created_at"]},
            )
            .returning(comment_votes_table)
        )
        result = await self.session.execute(stmt)
        return row_to_vote(result.fetchone()._asdict())

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment."""
        stmt = comment_votes_table.delete().where(
            comment_votes_table.c.user_id == user_id,
            comment_votes_table.c.comment_id == comment_id,
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def count_by_comment(self, comment_id: CommentId) -> dict[VoteType, int]:
        """Count ledger rows per type."""
        stmt = (
            select(comment_votes_table.c.type, func.count())
            .where(comment_votes_table.c.comment_id == comment_id)
            .group_by(comment_votes_table.c.type)
        )
        result = await self.session.execute(stmt)
        counts = {vote_type: 0 for vote_type in VoteType}
        for vote_type, count in result.fetchall():
            counts[VoteType(vote_type)] = count
        return counts

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Vote]:
        """Find a user's votes on multiple comments (batch query)."""
        if not comment_ids:
            return []
        stmt = select(comment_votes_table).where(
            comment_votes_table.c.user_id == user_id,
            comment_votes_table.c.comment_id.in_(comment_ids),
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
