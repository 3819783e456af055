"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from vidtalk.domain.model.vote import Vote
from vidtalk.domain.value import CommentId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote, or overwrite the type of the user's existing vote.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> dict[VoteType, int]:
        """Count ledger rows per vote type for a comment.

        Returns:
            Mapping containing every VoteType, zero when absent
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Vote]:
        """Find a user's votes on multiple comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            List of votes by the user on the specified comments
        """
        pass
