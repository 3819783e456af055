"""In-memory video repository for testing."""

from typing import Optional

from vidtalk.domain.model.video import Video
from vidtalk.domain.repository.video import VideoRepository
from vidtalk.domain.value import VideoId
from vidtalk.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryVideoRepository(VideoRepository):
    """In-memory implementation of VideoRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        return self.database.videos.get(video_id)

    async def lock(self, video_id: VideoId) -> Optional[Video]:
        """Row locks are implied by the database-wide unit lock."""
        return self.database.videos.get(video_id)

    async def adjust_comment_count(
        self, video_id: VideoId, delta: int
    ) -> Optional[Video]:
        """Add delta to comment_count (floored at 0)."""
        video = self.database.videos.get(video_id)
        if not video:
            return None
        updated = video.model_copy(
            update={"comment_count": max(video.comment_count + delta, 0)}
        )
        self.database.videos[video_id] = updated
        return updated

    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        self.database.videos[video.id] = video
        return video
