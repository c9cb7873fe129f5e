"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.model import User
from threads.domain.repository import UserRepository
from threads.domain.value import IdentityId, ThreadId, UserId
from threads.persistence.mappers import row_to_user, user_to_dict
from threads.persistence.tables import users_table

# Columns overwritten when an existing user saves their profile
PROFILE_COLUMNS = ("username", "name", "bio", "image", "updated_at")


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by internal ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_identity_id(self, identity_id: IdentityId) -> Optional[User]:
        """Find a user by the identity provider's ID."""
        stmt = select(users_table).where(users_table.c.identity_id == identity_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Batch lookup of users by internal ID."""
        if not user_ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(list(set(user_ids))))
        result = await self.session.execute(stmt)
        users = [row_to_user(dict(row)) for row in result.mappings().all()]
        return {user.id: user for user in users}

    async def upsert_profile(self, user: User) -> User:
        """Insert or update a user keyed by identity ID.

        Uses INSERT ... ON CONFLICT so concurrent first saves of the same
        identity cannot create two records.
        """
        with logfire.span(
            "user_repository.upsert_profile", identity_id=user.identity_id
        ):
            user_dict = user_to_dict(user)
            stmt = insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.identity_id],
                set_={column: stmt.excluded[column] for column in PROFILE_COLUMNS},
            ).returning(users_table)

            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
            return row_to_user(dict(row))

    async def append_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Append a thread ID to the user's owned threads."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(thread_ids=func.array_append(users_table.c.thread_ids, thread_id))
        )
        await self.session.execute(stmt)
        await self.session.flush()
