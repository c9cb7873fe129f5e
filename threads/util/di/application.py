"""Application layer DI providers."""

from dishka import Scope, provide

from threads.application.usecase.thread import (
    CreateThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    ReplyToThreadUseCase,
)
from threads.application.usecase.user import GetUserUseCase, UpsertUserUseCase
from threads.config import PaginationSettings, Settings
from threads.domain.repository import UnitOfWork
from threads.domain.service import PathRevalidator, ThreadService, UserService
from threads.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_upsert_user_use_case(
        self,
        user_service: UserService,
        unit_of_work: UnitOfWork,
        revalidator: PathRevalidator,
        settings: Settings,
    ) -> UpsertUserUseCase:
        """Provide upsert user use case."""
        return UpsertUserUseCase(
            user_service=user_service,
            unit_of_work=unit_of_work,
            revalidator=revalidator,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self,
        thread_service: ThreadService,
        unit_of_work: UnitOfWork,
        revalidator: PathRevalidator,
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(
            thread_service=thread_service,
            unit_of_work=unit_of_work,
            revalidator=revalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_reply_to_thread_use_case(
        self,
        thread_service: ThreadService,
        unit_of_work: UnitOfWork,
        revalidator: PathRevalidator,
    ) -> ReplyToThreadUseCase:
        """Provide reply to thread use case."""
        return ReplyToThreadUseCase(
            thread_service=thread_service,
            unit_of_work=unit_of_work,
            revalidator=revalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, thread_service: ThreadService, pagination: PaginationSettings
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service, pagination=pagination)
