"""Read models for threads with their replies expanded.

A ``ThreadView`` is a thread whose author and (some levels of) replies
have been resolved. How deep replies are expanded depends on the query:
levels that were not expanded keep ``child_ids`` but leave ``children``
empty.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.model.thread import Thread
from threads.domain.model.user import User
from threads.domain.value import CommunityId, IdentityId, ThreadId, UserId


class AuthorSummary(DomainModel):
    """Public subset of a user shown next to a thread."""

    id: UserId
    identity_id: IdentityId
    name: str
    image: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(
            id=user.id,
            identity_id=user.identity_id,
            name=user.name,
            image=user.image,
        )


class ThreadView(DomainModel):
    """Thread with resolved author and expanded replies."""

    id: ThreadId
    text: str
    author_id: UserId
    author: Optional[AuthorSummary] = None  # None if the author record is missing
    parent_id: Optional[ThreadId] = None
    community_id: Optional[CommunityId] = None
    created_at: datetime
    child_ids: list[ThreadId] = Field(default_factory=list)
    children: list["ThreadView"] = Field(default_factory=list)

    @classmethod
    def from_thread(
        cls,
        thread: Thread,
        author: Optional[AuthorSummary],
        children: Optional[list["ThreadView"]] = None,
    ) -> "ThreadView":
        return cls(
            id=thread.id,
            text=thread.text,
            author_id=thread.author_id,
            author=author,
            parent_id=thread.parent_id,
            community_id=thread.community_id,
            created_at=thread.created_at,
            child_ids=list(thread.child_ids),
            children=children or [],
        )


class ThreadPage(DomainModel):
    """One page of top-level threads."""

    threads: list[ThreadView]
    is_next: bool
