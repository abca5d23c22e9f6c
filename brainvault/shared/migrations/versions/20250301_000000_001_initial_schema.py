# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

Tables created:
- users: Accounts (username + bcrypt hash)
- content: Saved links with their embedding (JSON, NULL until computed)
- tags: Tag titles
- content_tags: Junction table between content and tags
- share_links: Public share hashes

Enums created:
- contenttype: audio, article, twitter, youtube
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum types
content_type_enum = postgresql.ENUM(
    "audio",
    "article",
    "twitter",
    "youtube",
    name="contenttype",
    create_type=False,
)


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute("CREATE TYPE contenttype AS ENUM ('audio', 'article', 'twitter', 'youtube')")

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(64), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        *_timestamps(),
    )

    # Create content table
    op.create_table(
        "content",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("link", sa.Text(), nullable=False),
        sa.Column("type", content_type_enum, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("embedding", sa.JSON(), nullable=True),
        *_timestamps(),
    )

    # Create tags table
    op.create_table(
        "tags",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False, unique=True),
    )

    # Create content_tags table (junction table)
    op.create_table(
        "content_tags",
        sa.Column(
            "content_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("content.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "tag_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    # Create share_links table
    op.create_table(
        "share_links",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("hash", sa.String(64), nullable=False, index=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        *_timestamps(),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_table("share_links")
    op.drop_table("content_tags")
    op.drop_table("tags")
    op.drop_table("content")
    op.drop_table("users")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS contenttype")
