"""SQLAlchemy table definitions for Bunko.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POST TYPES TABLE
# ============================================================================
post_types_table = Table(
    "post_types",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False, unique=True),
    Column("title", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_type_id",
        UUID,
        ForeignKey("post_types.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("title", String(255), nullable=False),
    Column("slug", String(255), nullable=False),
    Column("content", JSONB(none_as_null=True), nullable=True),  # text or block tree
    Column("status", String(50), nullable=False, server_default="draft"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("word_count", Integer, nullable=True),
    Column("title_tag", String(255), nullable=True),
    Column("meta_description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_type_id", "slug", name="uq_posts_post_type_slug"),
)

Index("idx_posts_status_published_at", posts_table.c.status, posts_table.c.published_at)
Index("idx_posts_post_type_id", posts_table.c.post_type_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())
