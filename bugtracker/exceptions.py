"""Errors raised by the bug tracker API services."""


class BugtrackerError(Exception):
    """Base class for bug tracker client errors."""


class TransportError(BugtrackerError):
    """A request failed in transit or the server answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class NotFound(TransportError):
    """The requested entity does not exist (HTTP 404)."""
