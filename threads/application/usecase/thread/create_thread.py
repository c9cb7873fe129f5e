"""Create thread use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from threads.application.error import StoreAccessError
from threads.domain.model import Thread
from threads.domain.repository import UnitOfWork
from threads.domain.service import PathRevalidator, ThreadService
from threads.domain.value import CommunityId, UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    text: str = Field(min_length=1, max_length=10000)
    author_id: UUID
    community_id: UUID | None = None
    path: str  # Route to revalidate after the thread is created


class ThreadResponse(BaseModel):
    """Created thread."""

    id: str
    text: str
    author_id: str
    parent_id: str | None
    child_ids: list[str]
    community_id: str | None
    created_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadResponse":
        return cls(
            id=str(thread.id),
            text=thread.text,
            author_id=str(thread.author_id),
            parent_id=str(thread.parent_id) if thread.parent_id else None,
            child_ids=[str(cid) for cid in thread.child_ids],
            community_id=str(thread.community_id) if thread.community_id else None,
            created_at=thread.created_at,
        )


class CreateThreadUseCase:
    """Use case for posting a new top-level thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        unit_of_work: UnitOfWork,
        revalidator: PathRevalidator,
    ) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            unit_of_work: Transaction boundary for the writes
            revalidator: Cache revalidation port
        """
        self.thread_service = thread_service
        self.unit_of_work = unit_of_work
        self.revalidator = revalidator

    async def execute(self, request: CreateThreadRequest) -> ThreadResponse:
        """Execute create thread flow.

        Steps:
        1. Insert the thread (community is always cleared)
        2. Append it to the author's threads
        3. Commit both writes
        4. Revalidate the given path

        Args:
            request: Thread content, author and originating path

        Returns:
            The created thread

        Raises:
            StoreAccessError: If either write fails
        """
        with logfire.span("create_thread.execute", author_id=str(request.author_id)):
            try:
                thread = await self.thread_service.create_thread(
                    text=request.text,
                    author_id=UserId(request.author_id),
                    community_id=CommunityId(request.community_id)
                    if request.community_id
                    else None,
                )
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Failed to create thread",
                    author_id=str(request.author_id),
                    error=str(e),
                )
                raise StoreAccessError(f"Failed to create thread: {e}") from e

            await self.revalidator.revalidate(request.path)

            return ThreadResponse.from_thread(thread)
