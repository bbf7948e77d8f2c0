"""Custom exception hierarchy."""

from __future__ import annotations


class AoE4WorldError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(AoE4WorldError):
    """A query is missing a required field or has an invalid value.

    Raised immediately when a query is executed, before any request is made.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class FetchError(AoE4WorldError):
    """Fetching or decoding a response failed.

    Fetch errors are never retried. During pagination they are reported at
    the position of the failing page and end the sequence.
    """

    def __init__(self, message: str, page: int | None = None) -> None:
        super().__init__(message)
        self.page = page


class TransportError(FetchError):
    """The request did not complete (DNS, connection, timeout)."""

    pass


class RemoteError(FetchError):
    """The API answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str | None = None,
        page: int | None = None,
    ) -> None:
        super().__init__(message, page=page)
        self.status_code = status_code
        self.body = body


class RateLimitError(RemoteError):
    """API rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: float = 60.0,
        body: str | None = None,
        page: int | None = None,
    ) -> None:
        super().__init__(message, status_code=429, body=body, page=page)
        self.retry_after = retry_after


class DecodeError(FetchError):
    """The response body did not match the expected schema."""

    pass
