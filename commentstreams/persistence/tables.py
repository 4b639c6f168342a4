"""SQLAlchemy table definitions for comment streams.

These tables match the schema created by the Alembic migrations.
Pages, revisions and actors mirror the host wiki's own records; comment data
and the comment log belong to comment streams.
"""

from sqlalchemy import (
    Boolean,
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
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACTORS TABLE
# ============================================================================
actors_table = Table(
    "actors",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("real_name", String(255), nullable=True),
    Column("rights", ARRAY(String(64)), nullable=False, server_default="{}"),
)

# ============================================================================
# PAGES TABLE
# ============================================================================
pages_table = Table(
    "pages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("namespace", Integer, nullable=False),
    Column("title", String(255), nullable=False),
    Column("display_title", String(255), nullable=True),
    Column("text", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("namespace", "title", name="uq_pages_namespace_title"),
)

# ============================================================================
# REVISIONS TABLE
# ============================================================================
revisions_table = Table(
    "revisions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "page_id", Integer, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False
    ),
    Column("actor_id", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_revisions_page_created", revisions_table.c.page_id, revisions_table.c.created_at)

# ============================================================================
# CS_COMMENTS TABLE (one row per comment page)
# ============================================================================
comments_table = Table(
    "cs_comments",
    metadata,
    Column(
        "page_id", Integer, ForeignKey("pages.id", ondelete="CASCADE"), primary_key=True
    ),
    # Associated page may disappear; comments must still load
    Column(
        "assoc_page_id",
        Integer,
        ForeignKey("pages.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "parent_page_id",
        Integer,
        ForeignKey("cs_comments.page_id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("comment_title", String(255), nullable=True),
    Column("author_id", Integer, nullable=False),
    Column("author_name", String(255), nullable=False, server_default=""),
    Column("wikitext", Text, nullable=False),
    Column("html", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("modified_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_cs_comments_assoc_page_id", comments_table.c.assoc_page_id)
Index("idx_cs_comments_parent_page_id", comments_table.c.parent_page_id)

# ============================================================================
# CS_LOG TABLE
# ============================================================================
log_table = Table(
    "cs_log",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("log_type", String(32), nullable=False),
    Column("action", String(32), nullable=False),
    Column("actor_id", Integer, nullable=False),
    Column("page_id", Integer, nullable=False),  # No FK: entries outlive pages
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Whether the entry is shown in the recent changes feed
    Column("published", Boolean, nullable=False, server_default="false"),
)

Index("idx_cs_log_page_id", log_table.c.page_id)
