"""User use cases."""

from .get_user import GetUserRequest, GetUserUseCase, UserResponse
from .upsert_user import UpsertUserRequest, UpsertUserUseCase

__all__ = [
    "GetUserRequest",
    "GetUserUseCase",
    "UpsertUserRequest",
    "UpsertUserUseCase",
    "UserResponse",
]
