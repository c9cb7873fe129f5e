"""Domain layer DI providers."""

from dishka import Scope, provide

from threads.domain.repository import ThreadRepository, UserRepository
from threads.domain.service import ThreadService, UserService
from threads.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, user_repository: UserRepository
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository, user_repository=user_repository
        )
