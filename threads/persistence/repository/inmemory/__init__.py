"""In-memory repository implementations for testing."""

from .thread import InMemoryThreadRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryThreadRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
