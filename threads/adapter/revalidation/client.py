"""Path revalidation clients.

The frontend caches rendered pages per route. After a mutation the
backend tells it which route to recompute by POSTing the path to a
revalidation webhook.
"""

import httpx
import logfire

from threads.adapter.error import ProviderError
from threads.domain.service.revalidation import PathRevalidator


class HttpPathRevalidator(PathRevalidator):
    """Sends revalidation signals to the frontend's webhook.

    Delivery is best effort: a failed signal is logged and the mutation
    that triggered it still succeeds.
    """

    def __init__(
        self,
        webhook_url: str,
        secret: str | None = None,
        timeout: float = 5.0,
    ) -> None:
        """Initialize revalidator.

        Args:
            webhook_url: Endpoint accepting {"path": ...}
            secret: Shared secret sent as a bearer token, if configured
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.secret = secret
        self.timeout = timeout

    async def revalidate(self, path: str) -> None:
        """Ask the frontend to recompute ``path``."""
        with logfire.span("revalidation.revalidate", path=path):
            try:
                await self._send(path)
            except ProviderError as e:
                logfire.warn("Path revalidation failed", path=path, error=str(e))
                return

            logfire.info("Path revalidated", path=path)

    async def _send(self, path: str) -> None:
        """POST the path to the webhook.

        Raises:
            ProviderError: If the request fails or is rejected
        """
        headers = {}
        if self.secret:
            headers["Authorization"] = f"Bearer {self.secret}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url,
                    json={"path": path},
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise ProviderError(f"HTTP error during revalidation: {e}") from e

        if response.is_error:
            logfire.error(
                "Revalidation webhook rejected request",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"Revalidation failed: {response.status_code}")


class LoggingPathRevalidator(PathRevalidator):
    """Used when no webhook is configured: records the signal in the logs."""

    async def revalidate(self, path: str) -> None:
        logfire.info("Revalidation requested (no webhook configured)", path=path)


class MockPathRevalidator(PathRevalidator):
    """Mock revalidator for testing.

    Records every path it is asked to revalidate.
    """

    def __init__(self) -> None:
        self.revalidated_paths: list[str] = []

    async def revalidate(self, path: str) -> None:
        self.revalidated_paths.append(path)
