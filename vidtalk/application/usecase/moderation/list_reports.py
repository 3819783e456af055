"""List reports use case."""

from pydantic import BaseModel

from vidtalk.application.usecase.common import PaginationView, parse_id
from vidtalk.application.usecase.moderation.report_comment import ReportView
from vidtalk.domain.service import ModerationService
from vidtalk.domain.value import ReportStatus, UserId, VideoId


class ListReportsRequest(BaseModel):
    """List reports request."""

    video_id: str
    user_id: str  # Must own the video's channel
    page: int = 1
    limit: int | None = None
    status: ReportStatus | None = None


class ListReportsResponse(BaseModel):
    """List reports response."""

    reports: list[ReportView]
    pagination: PaginationView


class ListReportsUseCase:
    """Use case for a channel owner reviewing reports on a video."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        result = await self.moderation_service.list_reports(
            video_id=VideoId(parse_id(request.video_id, "Video")),
            requester_id=UserId(parse_id(request.user_id, "User")),
            page=request.page,
            limit=request.limit,
            status=request.status,
        )
        return ListReportsResponse(
            reports=[ReportView.from_report(r) for r in result.items],
            pagination=PaginationView.from_pagination(result.pagination),
        )
