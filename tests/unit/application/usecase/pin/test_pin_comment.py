"""Unit tests for PinCommentUseCase and UnpinCommentUseCase."""

import pytest

from vidtalk.application.usecase.pin import (
    PinCommentRequest,
    PinCommentUseCase,
    UnpinCommentUseCase,
)
from vidtalk.domain.error import NotAuthorizedError
from vidtalk.domain.repository import VideoRepository
from vidtalk.domain.service import CommentService
from tests.conftest import make_principal, make_video
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPinCommentUseCase:
    """Tests for pinning through the use case layer."""

    @pytest.mark.asyncio
    async def test_pin_and_unpin(self, unit_env):
        # Arrange
        pin_comment_use_case = await unit_env.get(PinCommentUseCase)
        unpin_comment_use_case = await unit_env.get(UnpinCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        video_repo = await unit_env.get(VideoRepository)
        owner = make_principal("Owner")
        video = await video_repo.save(make_video(owner_id=owner.id))
        comment = await comment_service.create_comment(
            video.id, make_principal(), "Pin"
        )
        request = PinCommentRequest(
            video_id=str(video.id), comment_id=str(comment.id), user_id=str(owner.id)
        )

        # Act
        pinned = await pin_comment_use_case.execute(request)
        unpinned = await unpin_comment_use_case.execute(request)

        # Assert
        assert pinned.comment.pinned is True
        assert pinned.comment.pinned_by == str(owner.id)
        assert unpinned.comment.pinned is False
        assert unpinned.comment.pinned_by is None

    @pytest.mark.asyncio
    async def test_viewer_cannot_pin(self, unit_env):
        pin_comment_use_case = await unit_env.get(PinCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video())
        viewer = make_principal()
        comment = await comment_service.create_comment(video.id, viewer, "Pin")

        with pytest.raises(NotAuthorizedError):
            await pin_comment_use_case.execute(
                PinCommentRequest(
                    video_id=str(video.id),
                    comment_id=str(comment.id),
                    user_id=str(viewer.id),
                )
            )
