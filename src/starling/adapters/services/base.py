"""Base común de los servicios (fachadas por recurso).

Cada operación sigue el mismo guion:
1. merge de defaults (constructor) + parámetros de la llamada;
2. `validate(shape, merged)`: si falla, no se envía nada;
3. construcción del `RequestDescriptor`;
4. `transport.send(...)` y la respuesta vuelve sin tocar.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Mapping
from urllib.parse import quote

import httpx

from starling.core.domain.headers import default_headers, payload_headers
from starling.core.domain.models import HttpMethod, RequestDescriptor, ResponseType
from starling.core.interfaces.transport import Transport
from starling.core.logging import get_logger
from starling.core.params import freeze, merge_params
from starling.core.validation import MIN_API_PARAMETERS, Shape, UnionShape, validate


def build_url(api_url: str, template: str, **segments: Any) -> str:
    """`{api_url}{template}` con cada segmento de path percent-encoded."""

    encoded = {
        key: quote(str(value.value if isinstance(value, Enum) else value), safe="")
        for key, value in segments.items()
    }
    return api_url.rstrip("/") + template.format(**encoded)


def query(**values: Any) -> dict[str, Any]:
    """Parámetros de query sin los `None` (httpx los enviaría vacíos)."""

    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in values.items()
        if value is not None
    }


class StarlingService:
    service_name: ClassVar[str] = "service"

    def __init__(self, defaults: Mapping[str, Any] | None = None, *, transport: Transport) -> None:
        self._defaults = freeze(defaults or {})
        self._transport = transport
        self._log = get_logger(f"starling.{self.service_name}")

    @property
    def defaults(self) -> Mapping[str, Any]:
        return self._defaults

    def resolve(
        self,
        shape: Shape | UnionShape,
        overrides: Mapping[str, Any] | None = None,
        *,
        fallbacks: Mapping[str, Any] | None = None,
        **explicit: Any,
    ) -> dict[str, Any]:
        """Merge + validación. `fallbacks` van por debajo de los defaults."""

        params = merge_params(fallbacks, self._defaults, overrides, explicit)
        validate(shape, params)
        return params

    def json_request(
        self,
        method: HttpMethod,
        params: Mapping[str, Any],
        template: str,
        *,
        segments: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        accept: str | None = None,
        response_type: ResponseType = ResponseType.JSON,
    ) -> RequestDescriptor:
        access_token = params["access_token"]
        headers = payload_headers(access_token) if body is not None else default_headers(access_token)
        if accept:
            headers["Accept"] = accept
        return RequestDescriptor(
            method=method,
            url=build_url(params["api_url"], template, **(segments or {})),
            headers=headers,
            params=dict(query_params) if query_params else None,
            data=dict(body) if body is not None else None,
            response_type=response_type,
        )

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        # Nunca se loguean headers ni body (llevan el token).
        self._log.debug("request", method=request.method.value, url=request.url)
        return await self._transport.send(request)

    async def _simple_get(self, template: str, overrides: Mapping[str, Any]) -> httpx.Response:
        params = self.resolve(MIN_API_PARAMETERS, overrides)
        return await self.send(self.json_request(HttpMethod.GET, params, template))
