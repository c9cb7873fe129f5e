"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import IdentityId, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def upsert_profile(
        self,
        identity_id: IdentityId,
        username: str,
        name: str,
        bio: str | None,
        image: str | None,
    ) -> User:
        """Create the user on first save, otherwise update the profile.

        Args:
            identity_id: External identity ID (upsert key)
            username: Username, stored lowercase
            name: Display name
            bio: Biography
            image: Profile image URL

        Returns:
            The stored user
        """
        with logfire.span("user_service.upsert_profile", identity_id=identity_id):
            now = datetime.now()
            user = User(
                id=UserId(uuid4()),  # Only used if the user is new
                identity_id=identity_id,
                username=Username(username),
                name=name,
                bio=bio,
                image=image,
                thread_ids=[],
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.upsert_profile(user)
            logfire.info(
                "User profile saved",
                identity_id=identity_id,
                user_id=str(saved.id),
                username=saved.username.root,
                created=saved.id == user.id,
            )
            return saved

    async def get_by_identity_id(self, identity_id: IdentityId) -> User | None:
        """Get user by external identity ID.

        Args:
            identity_id: External identity ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_identity_id", identity_id=identity_id):
            user = await self.user_repository.find_by_identity_id(identity_id)
            if user:
                logfire.info(
                    "User found", identity_id=identity_id, user_id=str(user.id)
                )
            else:
                logfire.warn("User not found", identity_id=identity_id)
            return user
