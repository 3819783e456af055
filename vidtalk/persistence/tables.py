"""SQLAlchemy table definitions for vidtalk.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

comment_status_enum = Enum(
    "active", "hidden", "deleted", name="comment_status", create_type=False
)
comment_vote_type_enum = Enum(
    "like", "dislike", name="comment_vote_type", create_type=False
)
report_reason_enum = Enum(
    "spam",
    "harassment",
    "inappropriate",
    "other",
    name="report_reason",
    create_type=False,
)
report_status_enum = Enum(
    "pending", "reviewed", "dismissed", name="report_status", create_type=False
)
notification_type_enum = Enum(
    "reply", "pinned", name="comment_notification_type", create_type=False
)

# ============================================================================
# VIDEOS TABLE (owned by the catalogue, read here for ownership)
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("channel_id", UUID, nullable=False),
    Column("owner_id", UUID, nullable=False),  # User who owns the channel
    Column("title", String(300), nullable=False, server_default=""),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("comment_count >= 0", name="video_comment_count_non_negative"),
)

Index("idx_videos_channel_id", videos_table.c.channel_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "video_id", UUID, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("author_display_name", String(255), nullable=False),  # Denormalized
    Column("author_avatar_url", Text, nullable=True),  # Denormalized
    Column("content", Text, nullable=False),
    Column("status", comment_status_enum, nullable=False, server_default="active"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("dislike_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("pinned", Boolean, nullable=False, server_default="false"),
    Column("pinned_at", TIMESTAMP(timezone=True), nullable=True),
    Column("pinned_by", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(content) >= 1", name="content_not_empty"),
    CheckConstraint(
        "like_count >= 0 AND dislike_count >= 0 AND reply_count >= 0",
        name="counters_non_negative",
    ),
    CheckConstraint("NOT pinned OR parent_id IS NULL", name="only_top_level_pinned"),
)

Index(
    "idx_comments_video_top_level",
    comments_table.c.video_id,
    comments_table.c.created_at.desc(),
    postgresql_where=comments_table.c.parent_id.is_(None),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# At most one pinned, non-deleted top-level comment per video
Index(
    "uq_comments_video_pinned",
    comments_table.c.video_id,
    unique=True,
    postgresql_where=text(
        "pinned AND parent_id IS NULL AND status <> 'deleted'"
    ),
)

# ============================================================================
# COMMENT VOTES TABLE (the vote ledger)
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column("type", comment_vote_type_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_vote"),
)

Index("idx_comment_votes_user_id", comment_votes_table.c.user_id)

# ============================================================================
# COMMENT REPORTS TABLE
# ============================================================================
comment_reports_table = Table(
    "comment_reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("reporter_id", UUID, nullable=False),
    Column("reason", report_reason_enum, nullable=False),
    Column("description", Text, nullable=True),
    Column("status", report_status_enum, nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comment_reports_comment_id", comment_reports_table.c.comment_id)
Index(
    "idx_comment_reports_reporter",
    comment_reports_table.c.comment_id,
    comment_reports_table.c.reporter_id,
)

# ============================================================================
# COMMENT NOTIFICATIONS TABLE
# ============================================================================
comment_notifications_table = Table(
    "comment_notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),  # Recipient
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", notification_type_enum, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comment_notifications_user_created",
    comment_notifications_table.c.user_id,
    comment_notifications_table.c.created_at.desc(),
)
