"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from vidtalk.domain.model.report import Report
from vidtalk.domain.value import CommentId, ReportId, ReportStatus, UserId, VideoId


class ReportRepository(ABC):
    """Repository for comment reports."""

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Append a report."""
        pass

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        pass

    @abstractmethod
    async def update_status(
        self, report_id: ReportId, status: ReportStatus
    ) -> Optional[Report]:
        """Move a report to a new review status."""
        pass

    @abstractmethod
    async def exists_for_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> bool:
        """Check whether a user has already reported a comment."""
        pass

    @abstractmethod
    async def find_by_video(
        self,
        video_id: VideoId,
        status: Optional[ReportStatus],
        limit: int,
        offset: int,
    ) -> tuple[list[Report], int]:
        """Find reports against comments on a video, newest first.

        Args:
            video_id: Video ID
            status: Only return reports in this status, or all when None
            limit: Page size
            offset: Number of reports to skip

        Returns:
            Tuple of (reports on this page, total matching reports)
        """
        pass
