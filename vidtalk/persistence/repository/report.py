"""PostgreSQL implementation of Report repository."""

from typing import Optional

from sqlalchemy import exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.model import Report
from vidtalk.domain.repository import ReportRepository
from vidtalk.domain.value import CommentId, ReportId, ReportStatus, UserId, VideoId
from vidtalk.persistence.mappers import report_to_dict, row_to_report
from vidtalk.persistence.tables import comment_reports_table, comments_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, report: Report) -> Report:
        """Append a report."""
        stmt = (
            comment_reports_table.insert()
            .values(**report_to_dict(report))
            .returning(comment_reports_table)
        )
        result = await self.session.execute(stmt)
        return row_to_report(result.fetchone()._asdict())

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(comment_reports_table).where(
            comment_reports_table.c.id == report_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def update_status(
        self, report_id: ReportId, status: ReportStatus
    ) -> Optional[Report]:
        """Move a report to a new review status."""
        stmt = (
            update(comment_reports_table)
            .where(comment_reports_table.c.id == report_id)
            .values(status=status.value)
            .returning(comment_reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def exists_for_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> bool:
        """Check for an earlier report by the same user."""
        stmt = select(
            exists().where(
                comment_reports_table.c.comment_id == comment_id,
                comment_reports_table.c.reporter_id == reporter_id,
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_video(
        self,
        video_id: VideoId,
        status: Optional[ReportStatus],
        limit: int,
        offset: int,
    ) -> tuple[list[Report], int]:
        """Find reports on a video's comments, newest first."""
        base = (
            select(comment_reports_table)
            .join(
                comments_table,
                comments_table.c.id == comment_reports_table.c.comment_id,
            )
            .where(comments_table.c.video_id == video_id)
        )
        if status:
            base = base.where(comment_reports_table.c.status == status.value)

        stmt = (
            base.add_columns(func.count().over().label("total_count"))
            .order_by(comment_reports_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        if rows:
            return [row_to_report(row) for row in rows], rows[0]["total_count"]

        count_stmt = select(func.count()).select_from(base.subquery())
        count_result = await self.session.execute(count_stmt)
        return [], count_result.scalar() or 0
