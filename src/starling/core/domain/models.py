"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da estructuras inmutables y autodocumentadas (Field) sin acoplar el
  Core a httpx ni a la CLI.
- `RequestDescriptor` es el contrato entre los servicios y el transporte:
  describe *qué* pedir, no *cómo* enviarlo.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class StatementFormat(str, Enum):
    """Formatos de descarga de extractos (se envían en `Accept`)."""

    PDF = "application/pdf"
    CSV = "text/csv"


class ResponseType(str, Enum):
    """How the transport should hand back the response body."""

    JSON = "json"
    TEXT = "text"
    BYTES = "bytes"
    STREAM = "stream"


class GrantType(str, Enum):
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


class CardControl(str, Enum):
    """Último segmento de `/api/v2/cards/{cardUid}/controls/<control>`."""

    LOCK = "enabled"
    ATM = "atm-enabled"
    ONLINE = "online-enabled"
    MOBILE_WALLET = "mobile-wallet-enabled"
    GAMBLING = "gambling-enabled"
    CARD_PRESENT = "pos-enabled"
    MAGSTRIPE = "mag-stripe-enabled"


class Issue(BaseModel):
    """Una violación concreta detectada por el validador."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(
        ...,
        description="Campo afectado (notación con puntos para shapes anidadas).",
    )
    code: str = Field(
        ...,
        description="Tipo de violación: 'required', 'invalid' o 'unknown'.",
    )
    message: str = Field(
        ...,
        description="Mensaje legible para humanos.",
    )
    expected: str | None = Field(
        default=None,
        description="Descripción de la restricción esperada.",
    )
    received: str | None = Field(
        default=None,
        description="Tipo/valor recibido (resumido).",
    )


class RequestDescriptor(BaseModel):
    """Petición completamente resuelta que se entrega al transporte.

    Reglas:
    - `params` va en la query string.
    - `data` es un body JSON; `form` es un body form-urlencoded.
    - A lo sumo uno de `data` / `form` está presente.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(..., description="Verbo HTTP (fijo por operación).")
    url: str = Field(..., min_length=1, description="URL absoluta con segmentos ya codificados.")
    headers: dict[str, str] = Field(default_factory=dict, description="Headers de la petición.")
    params: dict[str, Any] | None = Field(default=None, description="Parámetros de query.")
    data: dict[str, Any] | None = Field(default=None, description="Body JSON.")
    form: dict[str, str] | None = Field(default=None, description="Body form-urlencoded.")
    response_type: ResponseType = Field(
        default=ResponseType.JSON,
        description="Modo de respuesta pedido al transporte.",
    )
