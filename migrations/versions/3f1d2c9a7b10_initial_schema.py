"""initial_schema

Create the schema for Atelier:
- Accounts (profile + like_credit / like_points balances)
- Content (artwork and music catalog)
- Likes (one per account and content item)
- Follows (directed edges, no self-follow)
- Comments
- Notifications (append-only inbox)

Revision ID: 3f1d2c9a7b10
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1d2c9a7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE content_type AS ENUM ('artwork', 'music');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE notification_kind AS ENUM ('like', 'comment', 'follow');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    content_type = postgresql.ENUM(
        "artwork", "music", name="content_type", create_type=False
    )

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),  # Issued by the auth provider
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "artist_type", sa.String(100), nullable=False, server_default="artist"
        ),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("like_credit", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("like_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("like_credit >= 0", name="like_credit_non_negative"),
        sa.CheckConstraint("like_points >= 0", name="like_points_non_negative"),
    )

    # ========================================================================
    # CONTENT table
    # ========================================================================
    op.create_table(
        "content",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("content_type", content_type, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("media_url", sa.Text(), nullable=False),
        sa.Column("genre", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_content_owner_id", "content", ["owner_id"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("content_type", content_type, nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["content_id"], ["content.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # Business rule: one like per account per content item
        sa.UniqueConstraint("user_id", "content_id", name="unique_like"),
    )
    op.create_index("idx_likes_content_id", "likes", ["content_id"])

    # ========================================================================
    # FOLLOWS table
    # ========================================================================
    op.create_table(
        "follows",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("followed_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["follower_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followed_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "followed_id", name="unique_follow"),
        sa.CheckConstraint("follower_id <> followed_id", name="no_self_follow"),
    )
    op.create_index("idx_follows_followed_id", "follows", ["followed_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("content_type", content_type, nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["content_id"], ["content.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(text) BETWEEN 1 AND 5000", name="comment_text_length"
        ),
    )
    op.create_index(
        "idx_comments_content_created",
        "comments",
        ["content_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # NOTIFICATIONS table (append-only)
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column(
            "kind",
            postgresql.ENUM(
                "like",
                "comment",
                "follow",
                name="notification_kind",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("content_id", sa.UUID(), nullable=True),
        sa.Column("content_type", content_type, nullable=True),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["recipient_id"], ["accounts.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        # Follow notifications carry no content reference
        sa.CheckConstraint(
            "(kind = 'follow') = (content_id IS NULL)",
            name="content_matches_kind",
        ),
    )
    # Unread badge count is polled by every client
    op.create_index(
        "idx_notifications_recipient_read", "notifications", ["recipient_id", "read"]
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # TRIGGERS
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_accounts_updated_at
        BEFORE UPDATE ON accounts
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS update_accounts_updated_at ON accounts")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("follows")
    op.drop_table("likes")
    op.drop_table("content")
    op.drop_table("accounts")

    op.execute("DROP TYPE IF EXISTS notification_kind")
    op.execute("DROP TYPE IF EXISTS content_type")
