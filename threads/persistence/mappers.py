"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from threads.domain.model import Thread, User
from threads.domain.value import (
    CommunityId,
    IdentityId,
    ThreadId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        identity_id=IdentityId(row["identity_id"]),
        username=Username(row["username"]),
        name=row["name"],
        bio=row.get("bio"),
        image=row.get("image"),
        thread_ids=[ThreadId(_uuid(tid)) for tid in row.get("thread_ids") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    # Username is serialized to its root string by model_dump()
    return user.model_dump()


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        text=row["text"],
        author_id=UserId(_uuid(row["author_id"])),
        parent_id=ThreadId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        child_ids=[ThreadId(_uuid(cid)) for cid in row.get("child_ids") or []],
        community_id=CommunityId(_uuid(row["community_id"]))
        if row.get("community_id")
        else None,
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion
    """
    return thread.model_dump()
