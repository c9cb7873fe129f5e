"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from threads.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    UpsertUserRequest,
    UpsertUserUseCase,
    UserResponse,
)
from threads.domain.value import Username

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpsertUserAPIRequest(BaseModel):
    """API request for saving a user profile."""

    username: Username
    name: str = Field(min_length=1, max_length=255)
    bio: str | None = Field(default=None, max_length=1000)
    image: str | None = None
    path: str  # Page the save was made from, e.g. "/profile/edit"


@router.put("/{identity_id}", response_model=UserResponse)
async def upsert_user(
    identity_id: str,
    request: UpsertUserAPIRequest,
    upsert_user_use_case: FromDishka[UpsertUserUseCase],
) -> UserResponse:
    """Create or update the profile for an identity.

    Args:
        identity_id: Identity provider's user ID
        request: Profile fields and originating path
        upsert_user_use_case: Upsert user use case from DI

    Returns:
        The stored profile

    Example:
        PUT /users/user_2abc

        Request:
        {
            "username": "Alice",
            "name": "Alice Liddell",
            "bio": "Curiouser and curiouser",
            "image": "https://example.com/alice.png",
            "path": "/profile/edit"
        }
    """
    return await upsert_user_use_case.execute(
        UpsertUserRequest(
            identity_id=identity_id,
            username=request.username,
            name=request.name,
            bio=request.bio,
            image=request.image,
            path=request.path,
        )
    )


@router.get("/{identity_id}", response_model=UserResponse)
async def get_user(
    identity_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user by identity ID.

    Raises:
        HTTPException: If user not found
    """
    user = await get_user_use_case.execute(GetUserRequest(identity_id=identity_id))

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with identity '{identity_id}' not found",
        )

    return user
