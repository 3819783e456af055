"""Domain value objects for vidtalk.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from vidtalk.domain.value.common import ValueObject
from vidtalk.domain.value.identifiers import UserId


class CommentStatus(str, Enum):
    """Lifecycle status of a comment.

    ACTIVE and HIDDEN can move into each other; DELETED is terminal.
    """

    ACTIVE = "active"
    HIDDEN = "hidden"
    DELETED = "deleted"


class VoteType(str, Enum):
    """Type of vote."""

    LIKE = "like"
    DISLIKE = "dislike"


class CommentSortOrder(str, Enum):
    """Ordering applied to top-level comments after the pinned one."""

    NEWEST = "newest"
    OLDEST = "oldest"
    TOP = "top"


class ModerationAction(str, Enum):
    """Bulk moderation actions available to a channel owner."""

    HIDE = "hide"
    UNHIDE = "unhide"
    DELETE = "delete"


class ReportReason(str, Enum):
    """Reasons a viewer may give when reporting a comment."""

    SPAM = "spam"
    HARASSMENT = "harassment"
    INAPPROPRIATE = "inappropriate"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Review state of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"


class NotificationType(str, Enum):
    """Kinds of comment notification."""

    REPLY = "reply"
    PINNED = "pinned"


class Principal(ValueObject):
    """The authenticated caller.

    Resolved from the platform's auth token and passed explicitly into
    every write so services never reach for ambient request state.
    """

    id: UserId
    display_name: str = Field(min_length=1, max_length=255)
    avatar_url: Optional[str] = None
