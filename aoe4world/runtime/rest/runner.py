"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import DecodeError
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # Paginated endpoints accept `page` and `limit` and return a Page model
    paginated: bool = False


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ModelAdapter(ResponseAdapter):
    """Adapter decoding a JSON body into a pydantic model.

    Subclasses set ``model``. Schema mismatches are raised as ``DecodeError``.
    """

    model: ClassVar[type[BaseModel]]

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        try:
            return self.model.model_validate(response)
        except PydanticValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "<root>"
            raise DecodeError(
                f"Response does not match {self.model.__name__} "
                f"({e.error_count()} error(s), first at {location}: {first['msg']})",
                page=params.get("page"),
            ) from e


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None

        data = await self._t.get(path, params=query)
        return adapter.parse(data, params)
