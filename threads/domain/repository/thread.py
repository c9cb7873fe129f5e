"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threads.domain.model.thread import Thread
from threads.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, thread_ids: list[ThreadId]) -> dict[ThreadId, Thread]:
        """Batch lookup used to expand replies.

        Args:
            thread_ids: Thread IDs (duplicates allowed)

        Returns:
            Mapping of found IDs to threads; missing IDs are absent
        """
        pass

    @abstractmethod
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find threads without a parent, newest first.

        Args:
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Top-level threads ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count threads without a parent.

        Returns:
            Number of top-level threads
        """
        pass

    @abstractmethod
    async def create(self, thread: Thread) -> Thread:
        """Insert a new thread.

        Args:
            thread: The thread to insert

        Returns:
            The inserted thread
        """
        pass

    @abstractmethod
    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply to the parent's children.

        Args:
            parent_id: Parent thread ID
            child_id: Reply thread ID
        """
        pass
