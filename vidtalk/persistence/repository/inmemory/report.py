"""In-memory report repository for testing."""

from typing import Optional

from vidtalk.domain.model.report import Report
from vidtalk.domain.repository.report import ReportRepository
from vidtalk.domain.value import CommentId, ReportId, ReportStatus, UserId, VideoId
from vidtalk.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def save(self, report: Report) -> Report:
        """Append a report."""
        self.database.reports[report.id] = report
        return report

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self.database.reports.get(report_id)

    async def update_status(
        self, report_id: ReportId, status: ReportStatus
    ) -> Optional[Report]:
        """Move a report to a new review status."""
        report = self.database.reports.get(report_id)
        if not report:
            return None
        updated = report.model_copy(update={"status": status})
        self.database.reports[report_id] = updated
        return updated

    async def exists_for_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> bool:
        """Check for an earlier report by the same user."""
        return any(
            r.comment_id == comment_id and r.reporter_id == reporter_id
            for r in self.database.reports.values()
        )

    async def find_by_video(
        self,
        video_id: VideoId,
        status: Optional[ReportStatus],
        limit: int,
        offset: int,
    ) -> tuple[list[Report], int]:
        """Find reports on a video's comments, newest first."""
        comments = self.database.comments
        reports = [
            r
            for r in self.database.reports.values()
            if r.comment_id in comments
            and comments[r.comment_id].video_id == video_id
            and (status is None or r.status == status)
        ]
        reports.sort(key=lambda r: r.created_at, reverse=True)
        return reports[offset : offset + limit], len(reports)
