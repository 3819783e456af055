"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from vidtalk.domain.model.vote import Vote
from vidtalk.domain.repository.vote import VoteRepository
from vidtalk.domain.value import CommentId, UserId, VoteType
from vidtalk.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self.database.votes.get((comment_id, user_id))

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the existing vote's type."""
        key = (vote.comment_id, vote.user_id)
        existing = self.database.votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"type": vote.type, "created_at": vote.created_at}
            )
        self.database.votes[key] = vote
        return vote

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment."""
        return self.database.votes.pop((comment_id, user_id), None) is not None

    async def count_by_comment(self, comment_id: CommentId) -> dict[VoteType, int]:
        """Count ledger rows per type."""
        counts = {vote_type: 0 for vote_type in VoteType}
        for vote in self.database.votes.values():
            if vote.comment_id == comment_id:
                counts[vote.type] += 1
        return counts

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Vote]:
        """Find a user's votes on multiple comments (batch query)."""
        return [
            self.database.votes[(cid, user_id)]
            for cid in comment_ids
            if (cid, user_id) in self.database.votes
        ]
