"""PostgreSQL implementation of Thread repository."""

from typing import Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import Thread
from threads.domain.repository import ThreadRepository
from threads.domain.value import ThreadId
from threads.persistence.mappers import row_to_thread, thread_to_dict
from threads.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_thread(row._asdict()) if row else None

    async def find_by_ids(self, thread_ids: list[ThreadId]) -> dict[ThreadId, Thread]:
        """Batch lookup of threads by ID."""
        if not thread_ids:
            return {}

        with logfire.span("thread_repository.find_by_ids", count=len(thread_ids)):
            stmt = select(threads_table).where(
                threads_table.c.id.in_(list(set(thread_ids)))
            )
            result = await self.session.execute(stmt)
            threads = [row_to_thread(row._asdict()) for row in result.fetchall()]
            return {thread.id: thread for thread in threads}

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find threads without a parent, newest first."""
        with logfire.span(
            "thread_repository.find_top_level", limit=limit, offset=offset
        ):
            stmt = (
                select(threads_table)
                .where(threads_table.c.parent_id.is_(None))
                .order_by(desc(threads_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            threads = [row_to_thread(row._asdict()) for row in result.fetchall()]
            logfire.info("Found top-level threads", count=len(threads))
            return threads

    async def count_top_level(self) -> int:
        """Count threads without a parent."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(self, thread: Thread) -> Thread:
        """Insert a new thread."""
        with logfire.span("thread_repository.create", thread_id=str(thread.id)):
            stmt = threads_table.insert().values(**thread_to_dict(thread))
            await self.session.execute(stmt)
            await self.session.flush()
            return thread

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> None:
        """Append a reply to the parent's children."""
        stmt = (
            threads_table.update()
            .where(threads_table.c.id == parent_id)
            .values(child_ids=func.array_append(threads_table.c.child_ids, child_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()
