"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("identity_id", String(255), nullable=False, unique=True),  # Identity provider ID
    Column("username", String(255), nullable=False),  # Stored lowercase
    Column("name", String(255), nullable=False),
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column(
        "thread_ids",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),  # Owned threads in creation order
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("text", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=True,
    ),  # NULL for top-level threads
    Column(
        "child_ids",
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        server_default="{}",
    ),  # Replies in the order they were added
    Column("community_id", UUID(as_uuid=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_parent_id", threads_table.c.parent_id)
# Feed query: top-level threads newest first
Index(
    "idx_threads_top_level_created_at",
    threads_table.c.created_at.desc(),
    postgresql_where=threads_table.c.parent_id.is_(None),
)
