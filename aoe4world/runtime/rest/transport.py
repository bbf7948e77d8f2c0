"""REST transport delegating to the HTTP client."""

from __future__ import annotations

from typing import Any

from ...config import DEFAULT_TIMEOUT
from .http_client import HTTPClient


class RESTTransport:
    """Thin transport over ``HTTPClient`` used by ``RestRunner``.

    The transport is treated as a stateless request/response function; the
    underlying session handles its own connection safety.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def close(self) -> None:
        await self._http.close()
