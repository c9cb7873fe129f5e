"""Thread use cases."""

from .create_thread import CreateThreadRequest, CreateThreadUseCase, ThreadResponse
from .get_thread import GetThreadRequest, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsUseCase
from .reply_to_thread import ReplyToThreadRequest, ReplyToThreadUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsUseCase",
    "ReplyToThreadRequest",
    "ReplyToThreadUseCase",
    "ThreadResponse",
]
