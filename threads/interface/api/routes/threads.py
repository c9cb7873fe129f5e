"""Thread routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from threads.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsUseCase,
    ReplyToThreadRequest,
    ReplyToThreadUseCase,
    ThreadResponse,
)
from threads.domain.model import ThreadPage, ThreadView

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class ReplyAPIRequest(BaseModel):
    """API request for replying to a thread."""

    text: str = Field(min_length=1, max_length=10000)
    author_id: UUID
    path: str


@router.post("", response_model=ThreadResponse, status_code=status.HTTP_201_CREATED)
async def create_thread(
    request: CreateThreadRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> ThreadResponse:
    """Post a new top-level thread.

    ``community_id`` is accepted but always stored as null.

    Example:
        POST /threads

        Request:
        {
            "text": "Hello world",
            "author_id": "123e4567-e89b-12d3-a456-426614174000",
            "community_id": null,
            "path": "/"
        }
    """
    return await create_thread_use_case.execute(request)


@router.post(
    "/{thread_id}/replies",
    response_model=ThreadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_thread(
    thread_id: UUID,
    request: ReplyAPIRequest,
    reply_to_thread_use_case: FromDishka[ReplyToThreadUseCase],
) -> ThreadResponse:
    """Reply to an existing thread.

    Returns 404 if the parent thread does not exist.
    """
    return await reply_to_thread_use_case.execute(
        ReplyToThreadRequest(
            parent_id=thread_id,
            text=request.text,
            author_id=request.author_id,
            path=request.path,
        )
    )


@router.get("", response_model=ThreadPage)
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    page_number: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> ThreadPage:
    """List top-level threads, newest first, with their direct replies.

    Args:
        list_threads_use_case: List threads use case from DI
        page_number: 1-based page number
        page_size: Threads per page (configured default if omitted)

    Returns:
        The page and an ``is_next`` flag
    """
    return await list_threads_use_case.execute(
        ListThreadsRequest(page_number=page_number, page_size=page_size)
    )


@router.get("/{thread_id}", response_model=ThreadView)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> ThreadView:
    """Get a thread with its replies and their replies.

    Raises:
        HTTPException: If thread not found
    """
    thread = await get_thread_use_case.execute(GetThreadRequest(thread_id=thread_id))

    if not thread:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Thread '{thread_id}' not found",
        )

    return thread
