"""Revalidation infrastructure providers."""

from dishka import Scope, provide

from threads.adapter.revalidation import HttpPathRevalidator, LoggingPathRevalidator
from threads.config import Settings
from threads.domain.service import PathRevalidator
from threads.util.di.base import ProviderBase
from threads.util.error import ConfigurationError


class RevalidationProvider(ProviderBase):
    """Revalidation component base."""

    __mock_component__ = "revalidation"


class ProdRevalidationProvider(RevalidationProvider):
    """Production revalidation provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_path_revalidator(self, settings: Settings) -> PathRevalidator:
        """Provide path revalidator.

        Returns:
            Webhook revalidator, or a log-only one if no webhook is configured

        Raises:
            ConfigurationError: If the webhook URL is not an http(s) URL
        """
        webhook_url = settings.revalidation.webhook_url
        if not webhook_url:
            return LoggingPathRevalidator()

        if not webhook_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Revalidation webhook URL must be http(s): {webhook_url}"
            )

        return HttpPathRevalidator(
            webhook_url=webhook_url,
            secret=settings.revalidation.webhook_secret,
            timeout=settings.revalidation.timeout_seconds,
        )
