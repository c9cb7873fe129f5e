"""Get user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from threads.application.error import StoreAccessError
from threads.domain.model import User
from threads.domain.service import UserService
from threads.domain.value import IdentityId


class GetUserRequest(BaseModel):
    """Get user request."""

    identity_id: str = Field(min_length=1, max_length=255)


class UserResponse(BaseModel):
    """User profile response."""

    id: str
    identity_id: str
    username: str
    name: str
    bio: str | None
    image: str | None
    thread_ids: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            identity_id=user.identity_id,
            username=user.username.root,
            name=user.name,
            bio=user.bio,
            image=user.image,
            thread_ids=[str(tid) for tid in user.thread_ids],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetUserUseCase:
    """Use case for fetching a user by identity provider ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse | None:
        """Execute get user flow.

        Args:
            request: Request with identity ID

        Returns:
            User profile if the user exists, None otherwise

        Raises:
            StoreAccessError: If the lookup fails
        """
        try:
            user = await self.user_service.get_by_identity_id(
                IdentityId(request.identity_id)
            )
        except Exception as e:
            logfire.error(
                "Failed to fetch user", identity_id=request.identity_id, error=str(e)
            )
            raise StoreAccessError(f"Failed to fetch user: {e}") from e

        return UserResponse.from_user(user) if user else None
