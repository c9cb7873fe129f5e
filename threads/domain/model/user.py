"""User aggregate root.

Users are identified externally by the identity provider's id and
internally by a UUID that threads reference as their author.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threads.domain.model.common import DomainModel
from threads.domain.value import IdentityId, ThreadId, UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``thread_ids`` holds the ids of every thread the user authored, in
    creation order.
    """

    id: UserId
    identity_id: IdentityId
    username: Username
    name: str = Field(min_length=1, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=1000)
    image: Optional[str] = None
    thread_ids: list[ThreadId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
