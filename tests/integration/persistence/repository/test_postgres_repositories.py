"""Integration tests for the PostgreSQL repositories.

Requires a migrated database at DATABASE__URL; skipped otherwise. Data
is committed, so every test uses fresh identity IDs.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from threads.config import Settings
from threads.domain.repository import ThreadRepository, UserRepository
from threads.domain.service import ThreadService
from threads.domain.value import ThreadId
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not Settings().database_url, reason="DATABASE__URL not configured"
    ),
]

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _identity() -> str:
    return f"it_{uuid4().hex}"


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_upsert_inserts_then_updates(self, integration_env):
        """The second upsert for an identity should update the same row."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        identity_id = _identity()

        # Act
        first = await user_repo.upsert_profile(
            make_user(identity_id=identity_id, username="Carol", name="Carol")
        )
        second = await user_repo.upsert_profile(
            make_user(identity_id=identity_id, username="carol", name="Carol Danvers")
        )

        # Assert
        assert second.id == first.id
        assert second.username.root == "carol"
        assert second.name == "Carol Danvers"

        found = await user_repo.find_by_identity_id(identity_id)
        assert found.id == first.id
        assert found.name == "Carol Danvers"

    @pytest.mark.asyncio
    async def test_upsert_keeps_owned_threads(self, integration_env):
        """Updating a profile should not clear the owned thread list."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        identity_id = _identity()
        user = await user_repo.upsert_profile(make_user(identity_id=identity_id))
        thread = await thread_repo.create(make_thread(user.id))
        await user_repo.append_thread(user.id, thread.id)

        # Act
        updated = await user_repo.upsert_profile(
            make_user(identity_id=identity_id, name="Renamed")
        )

        # Assert
        assert updated.thread_ids == [thread.id]

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_missing(self, integration_env):
        """Batch lookup should return only users that exist."""
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.upsert_profile(make_user(identity_id=_identity()))

        found = await user_repo.find_by_ids([user.id, uuid4()])

        assert list(found) == [user.id]


class TestPostgresThreadRepository:
    """Integration tests for PostgresThreadRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, integration_env):
        """A created thread should round-trip with its fields intact."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await user_repo.upsert_profile(make_user(identity_id=_identity()))
        thread = make_thread(author.id, text="Persisted")

        # Act
        await thread_repo.create(thread)
        found = await thread_repo.find_by_id(thread.id)

        # Assert
        assert found is not None
        assert found.text == "Persisted"
        assert found.author_id == author.id
        assert found.parent_id is None
        assert found.child_ids == []
        assert found.community_id is None

    @pytest.mark.asyncio
    async def test_append_child_keeps_order(self, integration_env):
        """Children should be appended in insertion order."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await user_repo.upsert_profile(make_user(identity_id=_identity()))
        parent = await thread_repo.create(make_thread(author.id))
        first = await thread_repo.create(make_thread(author.id, parent_id=parent.id))
        second = await thread_repo.create(make_thread(author.id, parent_id=parent.id))

        # Act
        await thread_repo.append_child(parent.id, first.id)
        await thread_repo.append_child(parent.id, second.id)

        # Assert
        found = await thread_repo.find_by_id(parent.id)
        assert found.child_ids == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_top_level_query_excludes_replies(self, integration_env):
        """Replies should not be counted or listed as top-level threads."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await user_repo.upsert_profile(make_user(identity_id=_identity()))
        before = await thread_repo.count_top_level()

        # Newer than anything else so it heads the feed
        newest = make_thread(
            author.id, created_at=datetime.now() + timedelta(days=1)
        )
        await thread_repo.create(newest)
        await thread_repo.create(make_thread(author.id, parent_id=newest.id))

        # Act
        count = await thread_repo.count_top_level()
        [head] = await thread_repo.find_top_level(limit=1)

        # Assert
        assert count == before + 1
        assert head.id == newest.id

    @pytest.mark.asyncio
    async def test_thread_tree_from_database(self, integration_env):
        """The thread service should build a tree from stored rows."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_service = await integration_env.get(ThreadService)
        author = await user_repo.upsert_profile(make_user(identity_id=_identity()))
        root = await thread_service.create_thread("Root", author.id)
        child = await thread_service.create_reply(root.id, "Child", author.id)

        # Act
        view = await thread_service.get_thread_tree(root.id)

        # Assert
        assert [c.id for c in view.children] == [child.id]
        assert view.author.id == author.id

        stored_author = await user_repo.find_by_id(author.id)
        assert stored_author.thread_ids == [root.id, child.id]

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_missing(self, integration_env):
        """Batch lookup should ignore IDs with no row."""
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await user_repo.upsert_profile(make_user(identity_id=_identity()))
        thread = await thread_repo.create(make_thread(author.id))

        found = await thread_repo.find_by_ids([thread.id, ThreadId(uuid4())])

        assert list(found) == [thread.id]
