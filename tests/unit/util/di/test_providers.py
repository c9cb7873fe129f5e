"""Unit tests for DI provider selection and wiring."""

import pytest
from dishka import Provider, Scope, make_async_container

from threads.adapter.revalidation import HttpPathRevalidator, LoggingPathRevalidator
from threads.config import RevalidationSettings, Settings
from threads.domain.service import PathRevalidator
from threads.util.di import PersistenceProvider, RevalidationProvider, get_provider
from threads.util.di.infrastructure import (
    ProdPersistenceProvider,
    ProdRevalidationProvider,
)
from threads.util.di.core import ProdConfigProvider
from threads.util.error import ConfigurationError
from tests.di import (
    MockPersistenceProvider,
    MockRevalidationProvider,
    build_test_container,
)


def _revalidation_container(settings: Settings):
    settings_provider = Provider()
    settings_provider.from_context(provides=Settings, scope=Scope.APP)
    return make_async_container(
        settings_provider, ProdRevalidationProvider(), context={Settings: settings}
    )


class TestGetProvider:
    """Tests for mock/production provider selection."""

    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_production_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(RevalidationProvider) is ProdRevalidationProvider

    def test_selects_mock_implementation(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert (
            get_provider(RevalidationProvider, use_mock=True)
            is MockRevalidationProvider
        )

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})


class TestProdRevalidationProvider:
    """Tests for building the production revalidator from settings."""

    @pytest.mark.asyncio
    async def test_no_webhook_logs_only(self):
        container = _revalidation_container(
            Settings(revalidation=RevalidationSettings(webhook_url=None))
        )

        revalidator = await container.get(PathRevalidator)

        assert isinstance(revalidator, LoggingPathRevalidator)
        await container.close()

    @pytest.mark.asyncio
    async def test_webhook_configured(self):
        settings = Settings(
            revalidation=RevalidationSettings(
                webhook_url="https://app.example.com/api/revalidate",
                webhook_secret="s3cret",
            )
        )
        container = _revalidation_container(settings)

        revalidator = await container.get(PathRevalidator)

        assert isinstance(revalidator, HttpPathRevalidator)
        assert revalidator.secret == "s3cret"
        await container.close()

    @pytest.mark.asyncio
    async def test_invalid_webhook_url_rejected(self):
        settings = Settings(
            revalidation=RevalidationSettings(webhook_url="ftp://example.com/hook")
        )
        container = _revalidation_container(settings)

        with pytest.raises(ConfigurationError):
            await container.get(PathRevalidator)
        await container.close()
