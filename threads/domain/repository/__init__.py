"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from threads.domain.repository.thread import ThreadRepository
from threads.domain.repository.unit_of_work import UnitOfWork
from threads.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "UnitOfWork",
]
