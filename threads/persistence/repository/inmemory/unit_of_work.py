"""In-memory unit of work for testing."""

from threads.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are applied immediately; commits are only counted."""

    def __init__(self) -> None:
        self.commit_count = 0

    async def commit(self) -> None:
        self.commit_count += 1
