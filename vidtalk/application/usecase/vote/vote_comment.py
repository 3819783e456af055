"""Vote on comment use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import (
    ApiModel,
    parse_id,
    require_comment_on_video,
)
from vidtalk.domain.service import CommentService, VoteService
from vidtalk.domain.value import CommentId, UserId, VideoId, VoteType


class VoteCommentRequest(BaseModel):
    """Vote request."""

    video_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user
    type: VoteType


class VoteCommentResponse(ApiModel):
    """Vote response: the fresh counts and the caller's vote."""

    liked: bool
    disliked: bool
    like_count: int
    dislike_count: int
    user_vote: VoteType | None


class VoteCommentUseCase:
    """Use case for liking or disliking a comment."""

    def __init__(
        self, vote_service: VoteService, comment_service: CommentService
    ) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
            comment_service: Comment domain service (video membership check)
        """
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Voting the same type twice withdraws the vote.

        Raises:
            NotFoundError: If the comment is missing, deleted or on another video
        """
        video_id = VideoId(parse_id(request.video_id, "Video"))
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        user_id = UserId(parse_id(request.user_id, "User"))

        await require_comment_on_video(self.comment_service, comment_id, video_id)
        tally = await self.vote_service.vote(comment_id, user_id, request.type)

        return VoteCommentResponse(
            liked=tally.liked,
            disliked=tally.disliked,
            like_count=tally.like_count,
            dislike_count=tally.dislike_count,
            user_vote=tally.user_vote,
        )
