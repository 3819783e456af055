"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from vidtalk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from vidtalk.domain.error import InvalidParentError, NotFoundError
from vidtalk.domain.repository import VideoRepository
from tests.conftest import make_principal, make_video
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_comment_view(self, unit_env):
        """The response carries string ids and zeroed counters."""
        # Arrange
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video())
        author = make_principal("Alice")

        # Act
        response = await create_comment_use_case.execute(
            CreateCommentRequest(
                video_id=str(video.id), principal=author, content="Hello"
            )
        )

        # Assert
        view = response.comment
        assert view.video_id == str(video.id)
        assert view.author_id == str(author.id)
        assert view.author_display_name == "Alice"
        assert view.parent_id is None
        assert view.like_count == 0
        assert view.reply_count == 0

        dumped = view.model_dump(by_alias=True)
        assert "authorDisplayName" in dumped
        assert "likeCount" in dumped

    @pytest.mark.asyncio
    async def test_reply_links_to_parent(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video())
        parent = await create_comment_use_case.execute(
            CreateCommentRequest(
                video_id=str(video.id), principal=make_principal(), content="Parent"
            )
        )

        reply = await create_comment_use_case.execute(
            CreateCommentRequest(
                video_id=str(video.id),
                principal=make_principal(),
                content="Reply",
                parent_id=parent.comment.id,
            )
        )

        assert reply.comment.parent_id == parent.comment.id

    @pytest.mark.asyncio
    async def test_malformed_parent_id_is_invalid_parent(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video())

        with pytest.raises(InvalidParentError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    video_id=str(video.id),
                    principal=make_principal(),
                    content="Reply",
                    parent_id="nope",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_video_id_is_not_found(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    video_id="not-a-uuid", principal=make_principal(), content="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_video_is_not_found(self, unit_env):
        create_comment_use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await create_comment_use_case.execute(
                CreateCommentRequest(
                    video_id=str(uuid4()), principal=make_principal(), content="Hi"
                )
            )
