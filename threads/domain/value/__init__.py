"""Domain value objects."""

from threads.domain.value.identifiers import (
    CommunityId,
    IdentityId,
    ThreadId,
    UserId,
)
from threads.domain.value.types import Username

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommunityId",
    "IdentityId",
    # Types
    "Username",
]
