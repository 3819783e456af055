"""Video repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from vidtalk.domain.model.video import Video
from vidtalk.domain.value import VideoId


class VideoRepository(ABC):
    """Read-mostly view of the platform's video catalogue."""

    @abstractmethod
    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        pass

    @abstractmethod
    async def lock(self, video_id: VideoId) -> Optional[Video]:
        """Load a video and lock its row until the enclosing unit ends.

        Used to serialize pin changes on the same video.
        """
        pass

    @abstractmethod
    async def adjust_comment_count(
        self, video_id: VideoId, delta: int
    ) -> Optional[Video]:
        """Add ``delta`` to the video's comment count, never going below zero."""
        pass

    @abstractmethod
    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        pass
