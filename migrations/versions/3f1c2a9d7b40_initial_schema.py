"""initial_schema

Create the schema for EduForum:
- Accounts (name + role unique, salted password hash)
- Communities
- Feedbacks (vote counters with voter name arrays, star flag)
- Comments

Feedbacks and comments hold plain references to their parents so that
deleting a community or a post never cascades.

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 15:02:11.418203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),  # 'Student', 'Admin'
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", "role", name="uq_accounts_name_role"),
        sa.CheckConstraint("role IN ('Student', 'Admin')", name="ck_accounts_role"),
    )

    # ========================================================================
    # COMMUNITIES table
    # ========================================================================
    op.create_table(
        "communities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_communities_created_at",
        "communities",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # FEEDBACKS table
    # ========================================================================
    op.create_table(
        "feedbacks",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("community_id", sa.UUID(), nullable=False),  # No FK, no cascade
        sa.Column("student_name", sa.String(255), nullable=False),
        sa.Column("standing", sa.String(100), nullable=False),
        sa.Column("major", sa.String(200), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "upvoters",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "downvoters",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("starred", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="ck_feedbacks_upvotes"),
        sa.CheckConstraint("downvotes >= 0", name="ck_feedbacks_downvotes"),
    )
    op.create_index(
        "idx_feedbacks_community_created_at",
        "feedbacks",
        ["community_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("feedback_id", sa.UUID(), nullable=False),  # No FK, no cascade
        sa.Column("commenter_name", sa.String(255), nullable=False),
        sa.Column("comment_text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_feedback_created_at",
        "comments",
        ["feedback_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_feedback_created_at", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_feedbacks_community_created_at", table_name="feedbacks")
    op.drop_table("feedbacks")
    op.drop_index("idx_communities_created_at", table_name="communities")
    op.drop_table("communities")
    op.drop_table("accounts")
