"""Pin and unpin comment use cases."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import CommentView, parse_id
from vidtalk.domain.service import PinService
from vidtalk.domain.value import CommentId, UserId, VideoId


class PinCommentRequest(BaseModel):
    """Pin or unpin request."""

    video_id: str
    comment_id: str
    user_id: str  # Must own the video's channel


class PinCommentResponse(BaseModel):
    """Pin or unpin response."""

    comment: CommentView


class PinCommentUseCase:
    """Use case for pinning a comment on a video."""

    def __init__(self, pin_service: PinService) -> None:
        self.pin_service = pin_service

    async def execute(self, request: PinCommentRequest) -> PinCommentResponse:
        """Pin the comment, replacing any existing pin on the video.

        Raises:
            NotFoundError: If the video or comment is missing
            NotAuthorizedError: If the user is not the channel owner
            InvalidTargetError: If the comment is a reply or not active
        """
        pinned = await self.pin_service.pin(
            VideoId(parse_id(request.video_id, "Video")),
            CommentId(parse_id(request.comment_id, "Comment")),
            UserId(parse_id(request.user_id, "User")),
        )
        return PinCommentResponse(comment=CommentView.from_comment(pinned))


class UnpinCommentUseCase:
    """Use case for removing a comment's pin."""

    def __init__(self, pin_service: PinService) -> None:
        self.pin_service = pin_service

    async def execute(self, request: PinCommentRequest) -> PinCommentResponse:
        """Unpin the comment. A comment that is not pinned is left as is."""
        comment = await self.pin_service.unpin(
            VideoId(parse_id(request.video_id, "Video")),
            CommentId(parse_id(request.comment_id, "Comment")),
            UserId(parse_id(request.user_id, "User")),
        )
        return PinCommentResponse(comment=CommentView.from_comment(comment))
