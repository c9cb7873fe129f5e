"""Unit tests for SqlAlchemyUnitOfWork."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from threads.persistence.repository import SqlAlchemyUnitOfWork


class TestSqlAlchemyUnitOfWork:
    """Tests for SqlAlchemyUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_commits_session(self):
        """Should commit the request's session."""
        session = AsyncMock(spec=AsyncSession)

        await SqlAlchemyUnitOfWork(session).commit()

        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_failure_propagates(self):
        """Commit errors should reach the use case unchanged."""
        session = AsyncMock(spec=AsyncSession)
        session.commit.side_effect = RuntimeError("deadlock detected")

        with pytest.raises(RuntimeError, match="deadlock detected"):
            await SqlAlchemyUnitOfWork(session).commit()
