"""Domain model entities."""

from threads.domain.model.thread import Thread
from threads.domain.model.thread_tree import AuthorSummary, ThreadPage, ThreadView
from threads.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "AuthorSummary",
    "ThreadView",
    "ThreadPage",
]
