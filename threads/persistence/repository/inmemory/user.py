"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from threads.domain.model.user import User
from threads.domain.repository.user import UserRepository
from threads.domain.value import IdentityId, ThreadId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_identity_id(self, identity_id: IdentityId) -> Optional[User]:
        """Find a user by their identity provider ID."""
        for user in self._users.values():
            if user.identity_id == identity_id:
                return user
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch lookup of users by ID."""
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def upsert_profile(self, user: User) -> User:
        """Insert a new user or overwrite the profile fields of an existing one."""
        existing = await self.find_by_identity_id(user.identity_id)
        if existing is None:
            self._users[user.id] = user
            return user

        updated = existing.model_copy(
            update={
                "username": user.username,
                "name": user.name,
                "bio": user.bio,
                "image": user.image,
                "updated_at": datetime.now(),
            }
        )
        self._users[existing.id] = updated
        return updated

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append a thread ID to the user's owned threads."""
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={"thread_ids": [*user.thread_ids, thread_id]}
            )
