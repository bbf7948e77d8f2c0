"""Async HTTP client wrapper around aiohttp."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from enum import Enum
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT, USER_AGENT
from ...core.exceptions import DecodeError, RateLimitError, RemoteError, TransportError

logger = logging.getLogger(__name__)

# Keep error bodies short in exception messages
_MAX_BODY_IN_MESSAGE = 200


def encode_param(value: Any) -> str:
    """Render a query parameter value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_param(v) for v in value)
    return str(value)


def encode_params(params: dict[str, Any] | None) -> dict[str, str] | None:
    """Drop unset parameters and stringify the rest."""
    if params is None:
        return None
    return {key: encode_param(value) for key, value in params.items() if value is not None}


def _parse_retry_after(value: str | None, default: float = 60.0) -> float:
    if not value:
        return default
    try:
        return max(float(value), 0.0)
    except ValueError:
        return default


class HTTPClient:
    """Async HTTP client wrapper.

    Owns one lazily created ``aiohttp.ClientSession`` which provides the
    connection pool shared by all requests of a client, including concurrent
    page fetches.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {"User-Agent": USER_AGENT, "Accept": "application/json", **(headers or {})}
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def _build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        Raises:
            TransportError: If the request could not be completed
            RemoteError: If the API answered with status >= 400
            RateLimitError: If the API answered with status 429
            DecodeError: If the body is not valid JSON
        """
        url = self._build_url(url)
        query = encode_params(params)
        logger.debug("http_request", extra={"method": "GET", "url": url, "params": query})

        try:
            async with self.session.get(url, params=query, headers=headers) as response:
                if response.status >= 400:
                    body = await response.text()
                    raise self._status_error(url, response.status, body, response.headers)
                try:
                    return await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError) as e:
                    raise DecodeError(f"Invalid JSON body from {url}: {e}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"GET {url} timed out") from e

    @staticmethod
    def _status_error(url: str, status: int, body: str, headers: Any) -> RemoteError:
        snippet = body[:_MAX_BODY_IN_MESSAGE]
        if status == 429:
            retry_after = _parse_retry_after(headers.get("Retry-After") if headers else None)
            return RateLimitError(
                f"Rate limited on {url} (retry after {retry_after}s)",
                retry_after=retry_after,
                body=body,
            )
        return RemoteError(f"HTTP {status} from {url}: {snippet}", status_code=status, body=body)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
