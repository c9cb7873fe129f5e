"""Thread entity.

A thread is either a top-level post (no parent) or a reply to another
thread. Replies are tracked from both ends: the reply points at its
parent, and the parent keeps the ordered list of its children.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import CommunityId, ThreadId, UserId


class Thread(DomainModel):
    """Thread entity.

    Immutable after creation except for growth of ``child_ids``.
    """

    id: ThreadId
    text: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    parent_id: Optional[ThreadId] = None
    child_ids: list[ThreadId] = Field(default_factory=list)
    community_id: Optional[CommunityId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None
