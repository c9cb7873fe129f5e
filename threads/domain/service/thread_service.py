"""Thread domain service.

Creates threads and replies, and builds read models with authors and
replies resolved. Reply expansion is done one level at a time with batch
lookups, so a tree of depth N costs N thread queries plus one author
query per level.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from threads.domain.error import NotFoundError
from threads.domain.model import AuthorSummary, Thread, ThreadPage, ThreadView
from threads.domain.repository import ThreadRepository, UserRepository
from threads.domain.value import CommunityId, ThreadId, UserId

from .base import Service

# Replies expanded under a single thread: children and grandchildren
DETAIL_REPLY_DEPTH = 2
# Replies expanded under each thread of the feed: children only
FEED_REPLY_DEPTH = 1


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            user_repository: User repository (authors and owned threads)
        """
        self.thread_repository = thread_repository
        self.user_repository = user_repository

    async def create_thread(
        self,
        text: str,
        author_id: UserId,
        community_id: CommunityId | None = None,
    ) -> Thread:
        """Create a top-level thread and record it on the author.

        ``community_id`` is accepted but not stored: communities are not
        supported yet, so every thread is created without one.

        Args:
            text: Thread content
            author_id: Author's internal user ID
            community_id: Ignored

        Returns:
            Created thread
        """
        with logfire.span("thread_service.create_thread", author_id=str(author_id)):
            if community_id is not None:
                logfire.debug(
                    "Community ignored for new thread", community_id=str(community_id)
                )

            thread = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                parent_id=None,
                child_ids=[],
                community_id=None,
                created_at=datetime.now(),
            )
            saved = await self.thread_repository.create(thread)
            await self.user_repository.append_thread(author_id, saved.id)

            logfire.info(
                "Thread created", thread_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def create_reply(
        self,
        parent_id: ThreadId,
        text: str,
        author_id: UserId,
    ) -> Thread:
        """Create a reply and link it under its parent.

        Args:
            parent_id: Thread being replied to
            text: Reply content
            author_id: Author's internal user ID

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent thread does not exist
        """
        with logfire.span(
            "thread_service.create_reply",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            parent = await self.thread_repository.find_by_id(parent_id)
            if not parent:
                logfire.warn("Parent thread not found", parent_id=str(parent_id))
                raise NotFoundError("Thread", str(parent_id))

            reply = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                parent_id=parent.id,
                child_ids=[],
                community_id=None,
                created_at=datetime.now(),
            )
            saved = await self.thread_repository.create(reply)
            await self.thread_repository.append_child(parent.id, saved.id)
            await self.user_repository.append_thread(author_id, saved.id)

            logfire.info(
                "Reply created",
                thread_id=str(saved.id),
                parent_id=str(parent.id),
                author_id=str(author_id),
            )
            return saved

    async def get_thread_tree(
        self, thread_id: ThreadId, depth: int = DETAIL_REPLY_DEPTH
    ) -> ThreadView | None:
        """Get a thread with its author and ``depth`` levels of replies.

        Args:
            thread_id: Thread ID
            depth: Reply levels to expand

        Returns:
            Thread view if found, None otherwise
        """
        with logfire.span(
            "thread_service.get_thread_tree", thread_id=str(thread_id), depth=depth
        ):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                return None

            [view] = await self._expand([thread], depth)
            logfire.info(
                "Thread tree built",
                thread_id=str(thread_id),
                reply_count=len(view.children),
            )
            return view

    async def list_top_level(
        self,
        page_number: int = 1,
        page_size: int = 20,
        depth: int = FEED_REPLY_DEPTH,
    ) -> ThreadPage:
        """List one page of top-level threads, newest first.

        Args:
            page_number: 1-based page number
            page_size: Threads per page
            depth: Reply levels to expand under each thread

        Returns:
            The page and whether a further page exists
        """
        with logfire.span(
            "thread_service.list_top_level",
            page_number=page_number,
            page_size=page_size,
        ):
            skip = (page_number - 1) * page_size

            total = await self.thread_repository.count_top_level()
            threads = await self.thread_repository.find_top_level(
                limit=page_size, offset=skip
            )
            views = await self._expand(threads, depth)
            is_next = total > skip + len(views)

            logfire.info(
                "Threads listed", count=len(views), total=total, is_next=is_next
            )
            return ThreadPage(threads=views, is_next=is_next)

    async def _expand(self, threads: list[Thread], depth: int) -> list[ThreadView]:
        """Resolve authors and expand ``depth`` levels of replies.

        Children keep the order of the parent's ``child_ids``; references
        to threads that no longer exist are skipped.
        """
        if not threads:
            return []

        child_views: dict[ThreadId, ThreadView] = {}
        if depth > 0:
            child_ids = list(
                dict.fromkeys(cid for thread in threads for cid in thread.child_ids)
            )
            if child_ids:
                found = await self.thread_repository.find_by_ids(child_ids)
                expanded = await self._expand(list(found.values()), depth - 1)
                child_views = {view.id: view for view in expanded}

        authors = await self._resolve_authors(threads)

        return [
            ThreadView.from_thread(
                thread,
                author=authors.get(thread.author_id),
                children=[
                    child_views[cid] for cid in thread.child_ids if cid in child_views
                ],
            )
            for thread in threads
        ]

    async def _resolve_authors(
        self, threads: list[Thread]
    ) -> dict[UserId, AuthorSummary]:
        author_ids = list(dict.fromkeys(thread.author_id for thread in threads))
        users = await self.user_repository.find_by_ids(author_ids)
        return {
            user_id: AuthorSummary.from_user(user) for user_id, user in users.items()
        }
