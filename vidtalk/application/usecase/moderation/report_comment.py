"""Report comment use case."""

from datetime import datetime

from pydantic import BaseModel

from vidtalk.application.usecase.common import (
    ApiModel,
    parse_id,
    require_comment_on_video,
)
from vidtalk.domain.model import Report
from vidtalk.domain.service import CommentService, ModerationService
from vidtalk.domain.value import CommentId, ReportReason, ReportStatus, UserId, VideoId


class ReportView(ApiModel):
    """A report as returned to clients."""

    id: str
    comment_id: str
    reporter_id: str
    reason: ReportReason
    description: str | None
    status: ReportStatus
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportView":
        return cls(
            id=str(report.id),
            comment_id=str(report.comment_id),
            reporter_id=str(report.reporter_id),
            reason=report.reason,
            description=report.description,
            status=report.status,
            created_at=report.created_at,
        )


class ReportCommentRequest(BaseModel):
    """Report request.

    ``reason`` stays a plain string so that unknown reasons surface as a
    domain validation error rather than a schema error.
    """

    video_id: str
    comment_id: str
    user_id: str  # Reporter
    reason: str | None = None
    description: str | None = None


class ReportCommentResponse(BaseModel):
    """Report response."""

    report: ReportView


class ReportCommentUseCase:
    """Use case for reporting a comment."""

    def __init__(
        self,
        moderation_service: ModerationService,
        comment_service: CommentService,
    ) -> None:
        self.moderation_service = moderation_service
        self.comment_service = comment_service

    async def execute(self, request: ReportCommentRequest) -> ReportCommentResponse:
        """Execute report flow.

        Raises:
            ValidationError: If the reason is missing or unknown
            NotFoundError: If the comment is missing, deleted or on another video
        """
        video_id = VideoId(parse_id(request.video_id, "Video"))
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        user_id = UserId(parse_id(request.user_id, "User"))

        # Reason is checked before the comment lookup
        self.moderation_service.parse_reason(request.reason)
        await require_comment_on_video(self.comment_service, comment_id, video_id)

        report = await self.moderation_service.report(
            comment_id, user_id, request.reason, request.description
        )
        return ReportCommentResponse(report=ReportView.from_report(report))
