"""Strongly typed identifiers for vidtalk domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Owned by this engine
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
ReportId = NewType("ReportId", UUID)
NotificationId = NewType("NotificationId", UUID)

# Owned by the wider platform, referenced here
UserId = NewType("UserId", UUID)
VideoId = NewType("VideoId", UUID)
ChannelId = NewType("ChannelId", UUID)
