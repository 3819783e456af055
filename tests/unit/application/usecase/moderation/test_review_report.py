"""Unit tests for ReviewReportUseCase."""

from uuid import uuid4

import pytest

from vidtalk.application.usecase.moderation import (
    ReviewReportRequest,
    ReviewReportUseCase,
)
from vidtalk.domain.error import NotFoundError
from vidtalk.domain.repository import VideoRepository
from vidtalk.domain.service import CommentService, ModerationService
from vidtalk.domain.value import ReportStatus, UserId
from tests.conftest import make_principal, make_video
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReviewReportUseCase:
    """Tests for ReviewReportUseCase."""

    @pytest.mark.asyncio
    async def test_owner_marks_report_reviewed(self, unit_env):
        # Arrange
        review_report_use_case = await unit_env.get(ReviewReportUseCase)
        moderation_service = await unit_env.get(ModerationService)
        comment_service = await unit_env.get(CommentService)
        video_repo = await unit_env.get(VideoRepository)
        owner = make_principal("Owner")
        video = await video_repo.save(make_video(owner_id=owner.id))
        comment = await comment_service.create_comment(
            video.id, make_principal(), "Rude"
        )
        report = await moderation_service.report(
            comment.id, UserId(uuid4()), "harassment"
        )

        # Act
        result = await review_report_use_case.execute(
            ReviewReportRequest(
                video_id=str(video.id),
                report_id=str(report.id),
                user_id=str(owner.id),
                status=ReportStatus.REVIEWED,
            )
        )

        # Assert
        assert result.report.id == str(report.id)
        assert result.report.comment_id == str(comment.id)
        assert result.report.status == ReportStatus.REVIEWED

    @pytest.mark.asyncio
    async def test_malformed_report_id_is_not_found(self, unit_env):
        review_report_use_case = await unit_env.get(ReviewReportUseCase)
        video_repo = await unit_env.get(VideoRepository)
        owner = make_principal("Owner")
        video = await video_repo.save(make_video(owner_id=owner.id))

        with pytest.raises(NotFoundError):
            await review_report_use_case.execute(
                ReviewReportRequest(
                    video_id=str(video.id),
                    report_id="not-a-uuid",
                    user_id=str(owner.id),
                    status=ReportStatus.DISMISSED,
                )
            )
