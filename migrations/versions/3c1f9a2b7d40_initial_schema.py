"""initial_schema

Create the schema for threads:
- Users (keyed externally by identity provider ID, owning their threads)
- Threads (top-level posts and nested replies)

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-17 09:12:44.218530

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("identity_id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),  # Lowercase
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "thread_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
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
        sa.UniqueConstraint("identity_id", name="uq_users_identity_id"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),  # NULL = top-level
        sa.Column(
            "child_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("community_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_threads_author_id", "threads", ["author_id"])
    op.create_index("idx_threads_parent_id", "threads", ["parent_id"])
    # Feed query: top-level threads newest first
    op.create_index(
        "idx_threads_top_level_created_at",
        "threads",
        [sa.text("created_at DESC")],
        postgresql_where=sa.text("parent_id IS NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_threads_top_level_created_at", table_name="threads")
    op.drop_index("idx_threads_parent_id", table_name="threads")
    op.drop_index("idx_threads_author_id", table_name="threads")
    op.drop_table("threads")

    op.drop_index("idx_users_username", table_name="users")
    op.drop_table("users")
