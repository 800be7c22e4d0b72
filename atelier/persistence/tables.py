"""SQLAlchemy table definitions for Atelier.

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
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()

content_type_enum = Enum("artwork", "music", name="content_type", create_type=False)

# ============================================================================
# ACCOUNTS TABLE (profile + like economy balances)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True),  # Issued by the auth provider
    Column("name", String(100), nullable=False),
    Column("artist_type", String(100), nullable=False, server_default="artist"),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("website", Text, nullable=True),
    Column("like_credit", Integer, nullable=False, server_default="5"),
    Column("like_points", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_credit >= 0", name="like_credit_non_negative"),
    CheckConstraint("like_points >= 0", name="like_points_non_negative"),
)

# ============================================================================
# CONTENT TABLE (artworks and music tracks)
# ============================================================================
content_table = Table(
    "content",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "owner_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content_type", content_type_enum, nullable=False),
    Column("title", String(200), nullable=False),
    Column("media_url", Text, nullable=False),
    Column("genre", String(100), nullable=True),
    Column("description", Text, nullable=True),
    Column("tags", ARRAY(String), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_content_owner_id", content_table.c.owner_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "content_id", UUID, ForeignKey("content.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content_type", content_type_enum, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "content_id", name="unique_like"),
)

Index("idx_likes_content_id", likes_table.c.content_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "follower_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "followed_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("follower_id", "followed_id", name="unique_follow"),
    CheckConstraint("follower_id <> followed_id", name="no_self_follow"),
)

Index("idx_follows_followed_id", follows_table.c.followed_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "content_id", UUID, ForeignKey("content.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content_type", content_type_enum, nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_content_created",
    comments_table.c.content_id,
    comments_table.c.created_at.desc(),
)

# ============================================================================
# NOTIFICATIONS TABLE (append-only inbox)
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("actor_id", UUID, nullable=False),
    Column(
        "kind",
        Enum("like", "comment", "follow", name="notification_kind", create_type=False),
        nullable=False,
    ),
    Column("content_id", UUID, nullable=True),
    Column("content_type", content_type_enum, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Unread badge count is polled frequently
Index(
    "idx_notifications_recipient_read",
    notifications_table.c.recipient_id,
    notifications_table.c.read,
)
Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
