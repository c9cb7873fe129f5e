"""PostgreSQL repository implementations."""

from threads.persistence.repository.thread import PostgresThreadRepository
from threads.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from threads.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "SqlAlchemyUnitOfWork",
]
