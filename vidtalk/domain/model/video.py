"""Video entity.

Videos are owned by the wider platform. This engine only needs to know
who owns each video and keeps the video's comment count current.
"""

from pydantic import Field

from vidtalk.domain.model.common import DomainModel
from vidtalk.domain.value import ChannelId, UserId, VideoId


class Video(DomainModel):
    """Video as seen by the comment engine."""

    id: VideoId
    channel_id: ChannelId
    owner_id: UserId  # User who owns the channel
    title: str = ""
    comment_count: int = Field(default=0, ge=0)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id
