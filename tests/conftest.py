"""Test configuration and fixtures."""

from uuid import uuid4

from vidtalk.domain.model import Video
from vidtalk.domain.value import ChannelId, Principal, UserId, VideoId


def make_principal(display_name: str = "Viewer") -> Principal:
    """Helper function to build an authenticated caller with a fresh id."""
    return Principal(id=UserId(uuid4()), display_name=display_name)


def make_video(owner_id: UserId | None = None, title: str = "Test Video") -> Video:
    """Helper function to build a video owned by ``owner_id``.

    Args:
        owner_id: Channel owner (random when omitted)
        title: Video title

    Returns:
        Video with no comments
    """
    return Video(
        id=VideoId(uuid4()),
        channel_id=ChannelId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        title=title,
        comment_count=0,
    )
