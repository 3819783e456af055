"""Vote domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from vidtalk.config import ConcurrencySettings
from vidtalk.domain.error import NotFoundError
from vidtalk.domain.model import Vote, VoteTally
from vidtalk.domain.repository import (
    CommentRepository,
    TransactionManager,
    VoteRepository,
)
from vidtalk.domain.value import CommentId, UserId, VoteId, VoteType
from vidtalk.util.retry import run_with_retry

from .base import Service


class VoteService(Service):
    """Domain service for the like/dislike ledger."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        transactions: TransactionManager,
        concurrency_settings: ConcurrencySettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_repository: Comment repository (cached counters)
            transactions: Unit-of-work scope for counter updates
            concurrency_settings: Retry policy for contended counters
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository
        self.transactions = transactions
        self.concurrency_settings = concurrency_settings

    async def vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: VoteType
    ) -> VoteTally:
        """Cast, switch or withdraw a vote.

        - No prior vote: the vote is recorded
        - Prior vote of the other type: it is replaced
        - Prior vote of the same type: it is removed (toggle off)

        The comment row is locked while the ledger changes and both counters
        are then recounted from the ledger.

        Args:
            comment_id: Comment being voted on
            user_id: Voter
            vote_type: LIKE or DISLIKE

        Returns:
            Fresh counts and the voter's resulting vote

        Raises:
            NotFoundError: If the comment is missing or deleted
        """
        with logfire.span(
            "vote_service.vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):

            async def unit() -> VoteTally:
                async with self.transactions.atomic():
                    comment = await self.comment_repository.lock(comment_id)
                    if not comment or comment.is_deleted:
                        logfire.warn(
                            "Vote on missing comment", comment_id=str(comment_id)
                        )
                        raise NotFoundError("Comment", str(comment_id))

                    existing = await self.vote_repository.find_by_user_and_comment(
                        user_id, comment_id
                    )
                    user_vote: Optional[VoteType]
                    if existing and existing.type == vote_type:
                        await self.vote_repository.delete_by_user_and_comment(
                            user_id, comment_id
                        )
                        user_vote = None
                    else:
                        await self.vote_repository.save(
                            Vote(
                                id=existing.id if existing else VoteId(uuid4()),
                                comment_id=comment_id,
                                user_id=user_id,
                                type=vote_type,
                                created_at=datetime.now(),
                            )
                        )
                        user_vote = vote_type

                    counts = await self.vote_repository.count_by_comment(comment_id)
                    await self.comment_repository.set_vote_counts(
                        comment_id,
                        like_count=counts[VoteType.LIKE],
                        dislike_count=counts[VoteType.DISLIKE],
                    )
                    return VoteTally(
                        like_count=counts[VoteType.LIKE],
                        dislike_count=counts[VoteType.DISLIKE],
                        user_vote=user_vote,
                    )

            tally = await run_with_retry(
                "vote_service.vote", unit, self.concurrency_settings
            )
            logfire.info(
                "Vote recorded",
                comment_id=str(comment_id),
                user_id=str(user_id),
                user_vote=tally.user_vote.value if tally.user_vote else None,
                like_count=tally.like_count,
                dislike_count=tally.dislike_count,
            )
            return tally

    async def get_user_votes(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteType]:
        """Get a user's votes on several comments in one query.

        Args:
            user_id: Voter
            comment_ids: Comments to check

        Returns:
            Mapping of comment ID to vote type, only for comments voted on
        """
        if not comment_ids:
            return {}
        with logfire.span(
            "vote_service.get_user_votes",
            user_id=str(user_id),
            comment_count=len(comment_ids),
        ):
            votes = await self.vote_repository.find_by_user_and_comments(
                user_id, comment_ids
            )
            return {vote.comment_id: vote.type for vote in votes}
