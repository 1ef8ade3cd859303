"""SQLAlchemy table definitions for EduForum.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("role", String(20), nullable=False),  # 'Student', 'Admin'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("name", "role", name="uq_accounts_name_role"),
)

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_communities_created_at", communities_table.c.created_at.desc())

# ============================================================================
# FEEDBACKS TABLE
# ============================================================================
feedbacks_table = Table(
    "feedbacks",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # Plain reference: deleting a community leaves its posts in place
    Column("community_id", UUID(as_uuid=True), nullable=False),
    Column("student_name", String(255), nullable=False),  # Snapshot at creation
    Column("standing", String(100), nullable=False),
    Column("major", String(200), nullable=False),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("upvoters", ARRAY(Text), nullable=False, server_default="{}"),
    Column("downvoters", ARRAY(Text), nullable=False, server_default="{}"),
    Column("starred", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_feedbacks_community_created_at",
    feedbacks_table.c.community_id,
    feedbacks_table.c.created_at.desc(),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # Plain reference: deleting a post leaves its comments in place
    Column("feedback_id", UUID(as_uuid=True), nullable=False),
    Column("commenter_name", String(255), nullable=False),  # Snapshot at creation
    Column("comment_text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_feedback_created_at",
    comments_table.c.feedback_id,
    comments_table.c.created_at,
)
