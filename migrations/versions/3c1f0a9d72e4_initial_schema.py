"""initial_schema

Create the comment streams schema:
- Actors, pages and revisions (mirrors of the host wiki's records)
- Comments (one row per comment page, replies point at their parent)
- Comment log (audit trail of comment actions)

Revision ID: 3c1f0a9d72e4
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d72e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACTORS table
    # ========================================================================
    op.create_table(
        "actors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("real_name", sa.String(255), nullable=True),
        sa.Column(
            "rights",
            postgresql.ARRAY(sa.String(64)),
            nullable=False,
            server_default="{}",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # ========================================================================
    # PAGES table
    # ========================================================================
    op.create_table(
        "pages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("namespace", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("display_title", sa.String(255), nullable=True),
        sa.Column("text", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("namespace", "title", name="uq_pages_namespace_title"),
    )

    # ========================================================================
    # REVISIONS table
    # ========================================================================
    op.create_table(
        "revisions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("page_id", sa.Integer(), nullable=False),
        sa.Column("actor_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["page_id"], ["pages.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_revisions_page_created", "revisions", ["page_id", "created_at"]
    )

    # ========================================================================
    # CS_COMMENTS table
    # ========================================================================
    op.create_table(
        "cs_comments",
        sa.Column("page_id", sa.Integer(), nullable=False),
        sa.Column("assoc_page_id", sa.Integer(), nullable=True),
        sa.Column("parent_page_id", sa.Integer(), nullable=True),
        sa.Column("comment_title", sa.String(255), nullable=True),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("wikitext", sa.Text(), nullable=False),
        sa.Column("html", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("modified_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["page_id"], ["pages.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assoc_page_id"], ["pages.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["parent_page_id"], ["cs_comments.page_id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("page_id"),
    )
    op.create_index("idx_cs_comments_assoc_page_id", "cs_comments", ["assoc_page_id"])
    op.create_index(
        "idx_cs_comments_parent_page_id", "cs_comments", ["parent_page_id"]
    )

    # ========================================================================
    # CS_LOG table
    # ========================================================================
    op.create_table(
        "cs_log",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("log_type", sa.String(32), nullable=False),
        sa.Column("action", sa.String(32), nullable=False),
        sa.Column("actor_id", sa.Integer(), nullable=False),
        sa.Column("page_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("published", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_cs_log_page_id", "cs_log", ["page_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("cs_log")
    op.drop_table("cs_comments")
    op.drop_table("revisions")
    op.drop_table("pages")
    op.drop_table("actors")
