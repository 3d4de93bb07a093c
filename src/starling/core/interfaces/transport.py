"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los servicios solo construyen `RequestDescriptor`; cualquier objeto con
  `send` sirve (httpx real, un stub en tests, un proxy con auditoría...).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

from starling.core.domain.models import RequestDescriptor


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo del colaborador HTTP.

    Reglas de diseño:
    - `send` es asíncrono: una llamada de servicio = una petición.
    - Los fallos (red, timeout) se propagan tal cual; no se envuelven.
    """

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        """Ejecuta la petición y devuelve la respuesta sin transformar."""

        ...
