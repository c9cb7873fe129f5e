"""SQLAlchemy implementation of the unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from threads.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's session.

    The request scope still commits on exit; after an explicit commit
    that final commit has nothing left to write.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        with logfire.span("unit_of_work.commit"):
            await self.session.commit()
