"""Unit tests for ReplyToThreadUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from threads.application.error import StoreAccessError
from threads.application.usecase.thread import (
    ReplyToThreadRequest,
    ReplyToThreadUseCase,
)
from threads.domain.error import NotFoundError
from threads.domain.repository import ThreadRepository, UnitOfWork, UserRepository
from threads.domain.service import PathRevalidator, ThreadService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReplyToThreadUseCase:
    """Tests for ReplyToThreadUseCase."""

    @pytest.mark.asyncio
    async def test_reply_is_linked(self, unit_env):
        """Should link the reply under its parent and revalidate the path."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread_service = await unit_env.get(ThreadService)
        revalidator = await unit_env.get(PathRevalidator)
        author = await user_repo.upsert_profile(make_user())
        parent = await thread_service.create_thread("Question?", author.id)
        use_case = await unit_env.get(ReplyToThreadUseCase)

        # Act
        response = await use_case.execute(
            ReplyToThreadRequest(
                parent_id=parent.id,
                text="Answer.",
                author_id=author.id,
                path=f"/thread/{parent.id}",
            )
        )

        # Assert
        assert response.parent_id == str(parent.id)
        stored_parent = await thread_repo.find_by_id(parent.id)
        assert [str(cid) for cid in stored_parent.child_ids] == [response.id]
        assert revalidator.revalidated_paths == [f"/thread/{parent.id}"]

    @pytest.mark.asyncio
    async def test_missing_parent_is_wrapped(self, unit_env):
        """Should wrap the not-found error and keep it as the cause."""
        # Arrange
        use_case = await unit_env.get(ReplyToThreadUseCase)
        revalidator = await unit_env.get(PathRevalidator)
        missing_id = uuid4()

        # Act & Assert
        with pytest.raises(StoreAccessError) as exc_info:
            await use_case.execute(
                ReplyToThreadRequest(
                    parent_id=missing_id, text="Hi", author_id=uuid4(), path="/"
                )
            )

        assert str(exc_info.value) == (
            f"Failed to add reply to thread: Thread not found: {missing_id}"
        )
        assert isinstance(exc_info.value.__cause__, NotFoundError)
        assert revalidator.revalidated_paths == []

    @pytest.mark.asyncio
    async def test_commits_before_revalidating(self, unit_env):
        """The reply should be committed before the thread page refreshes."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_service = await unit_env.get(ThreadService)
        author = await user_repo.upsert_profile(make_user())
        parent = await thread_service.create_thread("Question?", author.id)
        events: list[str] = []
        unit_of_work = AsyncMock(spec=UnitOfWork)
        unit_of_work.commit.side_effect = lambda: events.append("commit")
        revalidator = AsyncMock(spec=PathRevalidator)
        revalidator.revalidate.side_effect = lambda path: events.append(
            f"revalidate {path}"
        )
        use_case = ReplyToThreadUseCase(thread_service, unit_of_work, revalidator)

        # Act
        await use_case.execute(
            ReplyToThreadRequest(
                parent_id=parent.id, text="Answer.", author_id=author.id, path="/"
            )
        )

        # Assert
        assert events == ["commit", "revalidate /"]
