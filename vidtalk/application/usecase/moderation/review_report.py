"""Review report use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import parse_id
from vidtalk.application.usecase.moderation.report_comment import ReportView
from vidtalk.domain.service import ModerationService
from vidtalk.domain.value import ReportId, ReportStatus, UserId, VideoId


class ReviewReportRequest(BaseModel):
    """Review report request."""

    video_id: str
    report_id: str
    user_id: str  # Must own the video's channel
    status: ReportStatus


class ReviewReportResponse(BaseModel):
    """Review report response."""

    report: ReportView


class ReviewReportUseCase:
    """Use case for a channel owner marking a report reviewed or dismissed."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ReviewReportRequest) -> ReviewReportResponse:
        report = await self.moderation_service.review_report(
            video_id=VideoId(parse_id(request.video_id, "Video")),
            report_id=ReportId(parse_id(request.report_id, "Report")),
            requester_id=UserId(parse_id(request.user_id, "User")),
            status=request.status,
        )
        return ReviewReportResponse(report=ReportView.from_report(report))
