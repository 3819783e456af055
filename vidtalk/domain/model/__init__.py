"""Domain model entities for vidtalk."""

from vidtalk.domain.model.comment import Comment
from vidtalk.domain.model.notification import Notification
from vidtalk.domain.model.report import Report
from vidtalk.domain.model.thread import (
    BulkActionResult,
    CommentThread,
    CommentThreadPage,
    Page,
    Pagination,
    ThreadedComment,
)
from vidtalk.domain.model.video import Video
from vidtalk.domain.model.vote import Vote, VoteTally

__all__ = [
    "Comment",
    "Vote",
    "VoteTally",
    "Report",
    "Notification",
    "Video",
    "Pagination",
    "Page",
    "ThreadedComment",
    "CommentThread",
    "CommentThreadPage",
    "BulkActionResult",
]
