"""Vote entity.

The vote ledger holds at most one like or dislike per user per comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vidtalk.domain.model.common import DomainModel
from vidtalk.domain.value import CommentId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per comment (enforced by database unique constraint)
    - Voting the other type replaces the row, voting the same type removes it
    """

    id: VoteId
    comment_id: CommentId
    user_id: UserId
    type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)


class VoteTally(DomainModel):
    """Fresh counts for a comment after a vote, plus the caller's vote."""

    like_count: int = Field(ge=0)
    dislike_count: int = Field(ge=0)
    user_vote: Optional[VoteType] = None

    @property
    def liked(self) -> bool:
        return self.user_vote == VoteType.LIKE

    @property
    def disliked(self) -> bool:
        return self.user_vote == VoteType.DISLIKE
