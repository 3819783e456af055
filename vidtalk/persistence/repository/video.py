"""PostgreSQL implementation of Video repository."""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from vidtalk.domain.model import Video
from vidtalk.domain.repository import VideoRepository
from vidtalk.domain.value import VideoId
from vidtalk.persistence.mappers import row_to_video, video_to_dict
from vidtalk.persistence.tables import videos_table


class PostgresVideoRepository(VideoRepository):
    """PostgreSQL implementation of VideoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        stmt = select(videos_table).where(videos_table.c.id == video_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_video(row._asdict()) if row else None

    async def lock(self, video_id: VideoId) -> Optional[Video]:
        """Load a video with SELECT ... FOR UPDATE."""
        stmt = (
            select(videos_table)
            .where(videos_table.c.id == video_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_video(row._asdict()) if row else None

    async def adjust_comment_count(
        self, video_id: VideoId, delta: int
    ) -> Optional[Video]:
        """Atomically add delta to comment_count (floored at 0)."""
        stmt = (
            update(videos_table)
            .where(videos_table.c.id == video_id)
            .values(
                comment_count=func.greatest(videos_table.c.comment_count + delta, 0)
            )
            .returning(videos_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_video(row._asdict()) if row else None

    async def save(self, video: Video) -> Video:
        """Save a video (create or update)."""
        values = video_to_dict(video)
        stmt = (
            insert(videos_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[videos_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            .returning(videos_table)
        )
        result = await self.session.execute(stmt)
        return row_to_video(result.fetchone()._asdict())
