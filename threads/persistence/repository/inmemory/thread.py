"""In-memory thread repository for testing."""

from typing import Optional

from threads.domain.model.thread import Thread
from threads.domain.repository.thread import ThreadRepository
from threads.domain.value import ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_ids(self, thread_ids: list[ThreadId]) -> dict[ThreadId, Thread]:
        """Batch lookup of threads by ID."""
        return {tid: self._threads[tid] for tid in thread_ids if tid in self._threads}

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find top-level threads, newest first."""
        threads = [t for t in self._threads.values() if t.is_top_level]
        threads.sort(key=lambda t: t.created_at, reverse=True)
        return threads[offset : offset + limit]

    async def count_top_level(self) -> int:
        """Count top-level threads."""
        return sum(1 for t in self._threads.values() if t.is_top_level)

    async def create(self, thread: Thread) -> Thread:
        """Store a new thread."""
        self._threads[thread.id] = thread
        return thread

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply to the parent's children."""
        parent = self._threads.get(parent_id)
        if parent:
            self._threads[parent_id] = parent.model_copy(
                update={"child_ids": [*parent.child_ids, child_id]}
            )
