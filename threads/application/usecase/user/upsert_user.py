"""Upsert user use case."""

import logfire
from pydantic import BaseModel, Field

from threads.application.error import StoreAccessError
from threads.config import Settings
from threads.domain.repository import UnitOfWork
from threads.domain.service import PathRevalidator, UserService
from threads.domain.value import IdentityId, Username

from .get_user import UserResponse


class UpsertUserRequest(BaseModel):
    """Upsert user request."""

    identity_id: str = Field(min_length=1, max_length=255)
    username: Username
    name: str = Field(min_length=1, max_length=255)
    bio: str | None = Field(default=None, max_length=1000)
    image: str | None = None
    path: str  # Route the save was made from


class UpsertUserUseCase:
    """Use case for saving a user's profile.

    The first save for an identity creates the user; later saves update
    the profile fields. Saves made from the profile edit page refresh
    that page's cache.
    """

    def __init__(
        self,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        revalidator: PathRevalidator,
        settings: Settings,
    ) -> None:
        """Initialize upsert user use case.

        Args:
            user_service: User domain service
            unit_of_work: Transaction boundary for the write
            revalidator: Cache revalidation port
            settings: Application settings
        """
        self.user_service = user_service
        self.unit_of_work = unit_of_work
        self.revalidator = revalidator
        self.settings = settings

    async def execute(self, request: UpsertUserRequest) -> UserResponse:
        """Execute upsert user flow.

        Steps:
        1. Insert or update the user keyed by identity ID
        2. Commit the write
        3. Revalidate the edit page if the save came from it
        4. Return the stored profile

        Args:
            request: Profile fields and originating path

        Returns:
            The stored user profile

        Raises:
            StoreAccessError: If the write fails
        """
        with logfire.span("upsert_user.execute", identity_id=request.identity_id):
            try:
                user = await self.user_service.upsert_profile(
                    identity_id=IdentityId(request.identity_id),
                    username=request.username.root,
                    name=request.name,
                    bio=request.bio,
                    image=request.image,
                )
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Failed to create/update user",
                    identity_id=request.identity_id,
                    error=str(e),
                )
                raise StoreAccessError(f"Failed to create/update user: {e}") from e

            if request.path == self.settings.revalidation.profile_edit_path:
                await self.revalidator.revalidate(request.path)

            return UserResponse.from_user(user)
