"""Domain services."""

from .base import Service
from .revalidation import PathRevalidator
from .thread_service import DETAIL_REPLY_DEPTH, FEED_REPLY_DEPTH, ThreadService
from .user_service import UserService

__all__ = [
    "DETAIL_REPLY_DEPTH",
    "FEED_REPLY_DEPTH",
    "PathRevalidator",
    "Service",
    "ThreadService",
    "UserService",
]
