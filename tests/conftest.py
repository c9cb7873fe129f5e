"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from threads.domain.model import Thread, User
from threads.domain.value import IdentityId, ThreadId, UserId, Username

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    identity_id: str = "user_alice",
    username: str = "alice",
    name: str = "Alice",
    **overrides,
) -> User:
    """Build a user with sensible defaults."""
    now = datetime.now()
    fields = {
        "id": UserId(uuid4()),
        "identity_id": IdentityId(identity_id),
        "username": Username(username),
        "name": name,
        "bio": None,
        "image": None,
        "thread_ids": [],
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return User(**fields)


def make_thread(
    author_id: UserId,
    text: str = "Hello world",
    parent_id: ThreadId | None = None,
    minutes_ago: int = 0,
    **overrides,
) -> Thread:
    """Build a thread created ``minutes_ago`` minutes in the past."""
    fields = {
        "id": ThreadId(uuid4()),
        "text": text,
        "author_id": author_id,
        "parent_id": parent_id,
        "child_ids": [],
        "community_id": None,
        "created_at": datetime.now() - timedelta(minutes=minutes_ago),
    }
    fields.update(overrides)
    return Thread(**fields)
