"""Application layer errors."""


class ApplicationError(Exception):
    """Base application error."""

    pass


class StoreAccessError(ApplicationError):
    """A read or write against the record store failed.

    The message names the operation and carries the underlying error's
    message, e.g. ``Failed to fetch threads: connection refused``.
    """

    pass
