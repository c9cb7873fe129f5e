"""Get thread use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from threads.application.error import StoreAccessError
from threads.domain.model import ThreadView
from threads.domain.service import DETAIL_REPLY_DEPTH, ThreadService
from threads.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: UUID


class GetThreadUseCase:
    """Use case for fetching one thread with two levels of replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> ThreadView | None:
        """Execute get thread flow.

        Args:
            request: Request with thread ID

        Returns:
            The thread with its author, replies and replies to those
            replies, or None if it does not exist

        Raises:
            StoreAccessError: If the lookup fails
        """
        try:
            return await self.thread_service.get_thread_tree(
                ThreadId(request.thread_id), depth=DETAIL_REPLY_DEPTH
            )
        except Exception as e:
            logfire.error(
                "Failed to fetch thread by ID",
                thread_id=str(request.thread_id),
                error=str(e),
            )
            raise StoreAccessError(f"Failed to fetch thread by ID: {e}") from e
