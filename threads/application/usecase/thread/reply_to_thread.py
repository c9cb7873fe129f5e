"""Reply to thread use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from threads.application.error import StoreAccessError
from threads.domain.repository import UnitOfWork
from threads.domain.service import PathRevalidator, ThreadService
from threads.domain.value import ThreadId, UserId

from .create_thread import ThreadResponse


class ReplyToThreadRequest(BaseModel):
    """Reply to thread request."""

    parent_id: UUID
    text: str = Field(min_length=1, max_length=10000)
    author_id: UUID
    path: str


class ReplyToThreadUseCase:
    """Use case for replying to an existing thread."""

    def __init__(
        self,
        thread_service: ThreadService,
        unit_of_work: UnitOfWork,
        revalidator: PathRevalidator,
    ) -> None:
        """Initialize reply use case.

        Args:
            thread_service: Thread domain service
            unit_of_work: Transaction boundary for the writes
            revalidator: Cache revalidation port
        """
        self.thread_service = thread_service
        self.unit_of_work = unit_of_work
        self.revalidator = revalidator

    async def execute(self, request: ReplyToThreadRequest) -> ThreadResponse:
        """Execute reply flow.

        The reply is linked under its parent and recorded on its author.
        Both writes are committed before the path is revalidated.

        Args:
            request: Parent thread, reply content, author and originating path

        Returns:
            The created reply

        Raises:
            StoreAccessError: If the parent is missing or a write fails
        """
        with logfire.span(
            "reply_to_thread.execute", parent_id=str(request.parent_id)
        ):
            try:
                reply = await self.thread_service.create_reply(
                    parent_id=ThreadId(request.parent_id),
                    text=request.text,
                    author_id=UserId(request.author_id),
                )
                await self.unit_of_work.commit()
            except Exception as e:
                logfire.error(
                    "Failed to add reply to thread",
                    parent_id=str(request.parent_id),
                    error=str(e),
                )
                raise StoreAccessError(f"Failed to add reply to thread: {e}") from e

            await self.revalidator.revalidate(request.path)

            return ThreadResponse.from_thread(reply)
