"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary shared by the repositories of one request.

    Use cases commit before announcing a write to the outside world, so
    nothing observes a change that could still be rolled back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every pending repository write durable."""
        pass
