"""Wrapper de httpx (transporte por defecto).

Por qué un wrapper:
- Estandariza timeouts y User-Agent para todos los servicios.
- Traduce `RequestDescriptor` -> `httpx.Request` en un único sitio.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con
  `httpx.MockTransport`, o sustituir el transporte entero por un stub.

Sin reintentos, sin caché, sin `raise_for_status`: la respuesta (o el error
de httpx) llega al caller tal cual.
"""

from __future__ import annotations

import httpx

from starling.core.config import StarlingSettings
from starling.core.domain.models import RequestDescriptor, ResponseType


def build_async_client(
    settings: StarlingSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los servicios se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or StarlingSettings()
    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def to_httpx_request(client: httpx.AsyncClient, request: RequestDescriptor) -> httpx.Request:
    return client.build_request(
        request.method.value,
        request.url,
        headers=request.headers,
        params=request.params,
        json=request.data,
        data=request.form,
    )


class HttpxTransport:
    """Implementación de `Transport` sobre un `httpx.AsyncClient` compartido.

    Si no se pasa `client`, se crea uno perezosamente y este transporte es su
    dueño (lo cierra en `aclose`). Un cliente inyectado no se cierra aquí.
    """

    def __init__(
        self,
        settings: StarlingSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or StarlingSettings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self._client

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        http_request = to_httpx_request(self.client, request)
        # En modo stream el body queda sin leer: el caller debe cerrarlo.
        stream = request.response_type == ResponseType.STREAM
        return await self.client.send(http_request, stream=stream)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
