"""Cache revalidation port."""

from abc import ABC, abstractmethod


class PathRevalidator(ABC):
    """Signals that cached content for a path should be recomputed.

    The cache itself lives outside this service (the frontend's page
    cache); implementations only deliver the signal.
    """

    @abstractmethod
    async def revalidate(self, path: str) -> None:
        """Mark cached content for ``path`` as stale.

        Args:
            path: Route path, e.g. "/profile/edit"
        """
        pass
