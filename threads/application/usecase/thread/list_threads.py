"""List threads use case."""

import logfire
from pydantic import BaseModel, Field

from threads.application.error import StoreAccessError
from threads.config import PaginationSettings
from threads.domain.model import ThreadPage
from threads.domain.service import FEED_REPLY_DEPTH, ThreadService


class ListThreadsRequest(BaseModel):
    """List threads request."""

    page_number: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)  # None: configured default


class ListThreadsUseCase:
    """Use case for the paginated feed of top-level threads."""

    def __init__(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            pagination: Page size defaults and limits
        """
        self.thread_service = thread_service
        self.pagination = pagination

    async def execute(self, request: ListThreadsRequest) -> ThreadPage:
        """Execute list threads flow.

        Threads are newest first, each with its author and direct replies.
        Page sizes above the configured maximum are capped.

        Args:
            request: Page number and size

        Returns:
            The page and whether another page follows

        Raises:
            StoreAccessError: If the count or the page query fails
        """
        page_size = min(
            request.page_size or self.pagination.default_page_size,
            self.pagination.max_page_size,
        )

        with logfire.span(
            "list_threads.execute",
            page_number=request.page_number,
            page_size=page_size,
        ):
            try:
                return await self.thread_service.list_top_level(
                    page_number=request.page_number,
                    page_size=page_size,
                    depth=FEED_REPLY_DEPTH,
                )
            except Exception as e:
                logfire.error(
                    "Failed to fetch threads",
                    page_number=request.page_number,
                    error=str(e),
                )
                raise StoreAccessError(f"Failed to fetch threads: {e}") from e
