"""Report entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from vidtalk.domain.model.common import DomainModel
from vidtalk.domain.value import (
    CommentId,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
)


class Report(DomainModel):
    """A viewer's report against a comment.

    Reports are recorded for the channel owner to review; nothing acts on
    them automatically.
    """

    id: ReportId
    comment_id: CommentId
    reporter_id: UserId
    reason: ReportReason
    description: Optional[str] = Field(default=None, max_length=1000)
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
