"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .revalidation import MockRevalidationProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockRevalidationProvider",
    "build_test_container",
]
