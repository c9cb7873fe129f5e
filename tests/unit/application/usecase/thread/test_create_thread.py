"""Unit tests for CreateThreadUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from pydantic import ValidationError

from threads.application.error import StoreAccessError
from threads.application.usecase.thread import CreateThreadRequest, CreateThreadUseCase
from threads.domain.repository import ThreadRepository, UnitOfWork, UserRepository
from threads.domain.service import PathRevalidator, ThreadService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateThreadUseCase:
    """Tests for CreateThreadUseCase."""

    @pytest.mark.asyncio
    async def test_creates_top_level_thread(self, unit_env):
        """Should create exactly one top-level thread without a community."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        author = await user_repo.upsert_profile(make_user())
        use_case = await unit_env.get(CreateThreadUseCase)

        # Act
        response = await use_case.execute(
            CreateThreadRequest(
                text="Hello world",
                author_id=author.id,
                community_id=uuid4(),
                path="/",
            )
        )

        # Assert
        assert response.author_id == str(author.id)
        assert response.community_id is None
        assert response.parent_id is None
        assert await thread_repo.count_top_level() == 1

        stored_author = await user_repo.find_by_id(author.id)
        assert [str(tid) for tid in stored_author.thread_ids] == [response.id]

    @pytest.mark.asyncio
    async def test_revalidates_given_path(self, unit_env):
        """Should revalidate the path the thread was posted from."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.upsert_profile(make_user())
        use_case = await unit_env.get(CreateThreadUseCase)
        revalidator = await unit_env.get(PathRevalidator)

        # Act
        await use_case.execute(
            CreateThreadRequest(text="Hello", author_id=author.id, path="/")
        )

        # Assert
        assert revalidator.revalidated_paths == ["/"]

    @pytest.mark.asyncio
    async def test_store_failure_is_wrapped(self, unit_env):
        """Should raise StoreAccessError and skip revalidation on failure."""
        # Arrange
        thread_service = AsyncMock(spec=ThreadService)
        thread_service.create_thread.side_effect = RuntimeError("disk full")
        unit_of_work = await unit_env.get(UnitOfWork)
        revalidator = await unit_env.get(PathRevalidator)
        use_case = CreateThreadUseCase(thread_service, unit_of_work, revalidator)

        # Act & Assert
        with pytest.raises(StoreAccessError, match="^Failed to create thread: disk full$"):
            await use_case.execute(
                CreateThreadRequest(text="Hello", author_id=uuid4(), path="/")
            )

        assert revalidator.revalidated_paths == []
        assert unit_of_work.commit_count == 0

    def test_empty_text_rejected(self):
        """Should reject an empty thread before touching the store."""
        with pytest.raises(ValidationError):
            CreateThreadRequest(text="", author_id=uuid4(), path="/")

    @pytest.mark.asyncio
    async def test_commits_before_revalidating(self, unit_env):
        """The write should be durable before the frontend is told to refresh."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.upsert_profile(make_user())
        thread_service = await unit_env.get(ThreadService)
        events: list[str] = []

        unit_of_work = AsyncMock(spec=UnitOfWork)
        unit_of_work.commit.side_effect = lambda: events.append("commit")
        revalidator = AsyncMock(spec=PathRevalidator)
        revalidator.revalidate.side_effect = lambda path: events.append(
            f"revalidate {path}"
        )
        use_case = CreateThreadUseCase(thread_service, unit_of_work, revalidator)

        # Act
        await use_case.execute(
            CreateThreadRequest(text="Hello", author_id=author.id, path="/")
        )

        # Assert
        assert events == ["commit", "revalidate /"]

    @pytest.mark.asyncio
    async def test_commit_failure_skips_revalidation(self, unit_env):
        """A failed commit should surface as StoreAccessError with no signal sent."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.upsert_profile(make_user())
        thread_service = await unit_env.get(ThreadService)
        unit_of_work = AsyncMock(spec=UnitOfWork)
        unit_of_work.commit.side_effect = RuntimeError("serialization failure")
        revalidator = await unit_env.get(PathRevalidator)
        use_case = CreateThreadUseCase(thread_service, unit_of_work, revalidator)

        # Act & Assert
        with pytest.raises(
            StoreAccessError, match="^Failed to create thread: serialization failure$"
        ):
            await use_case.execute(
                CreateThreadRequest(text="Hello", author_id=author.id, path="/")
            )

        assert revalidator.revalidated_paths == []
