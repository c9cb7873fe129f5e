"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Internal identifiers
UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)
CommunityId = NewType("CommunityId", UUID)

# Identifier issued by the external identity provider
IdentityId = NewType("IdentityId", str)
