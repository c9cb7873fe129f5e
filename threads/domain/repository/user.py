"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threads.domain.model.user import User
from threads.domain.value import IdentityId, ThreadId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by internal ID.

        Args:
            user_id: The user's internal identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_identity_id(self, identity_id: IdentityId) -> Optional[User]:
        """Find a user by the identity provider's ID.

        Args:
            identity_id: External identity ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch lookup used to resolve thread authors.

        Args:
            user_ids: Internal user IDs (duplicates allowed)

        Returns:
            Mapping of found IDs to users; missing IDs are absent
        """
        pass

    @abstractmethod
    async def upsert_profile(self, user: User) -> User:
        """Insert or update a user keyed by identity ID.

        On update only the profile fields (username, name, bio, image,
        updated_at) change; the internal ID, owned threads and created_at
        of the stored record are kept.

        Args:
            user: User carrying the profile fields

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append a thread ID to the user's owned threads.

        A missing user is a no-op.

        Args:
            user_id: Author's internal ID
            thread_id: Newly created thread
        """
        pass
