"""Servicio: intercambio de tokens OAuth.

Dos ramas mutuamente excluyentes (unión de shapes):
- authorization_code: `code` + `redirect_uri`.
- refresh_token: `refresh_token`, sin redirect URI.

El body va form-urlencoded (no JSON) y solo lleva los campos de la rama que
validó: nada de la config general (token, account uid...) se filtra al form.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

import httpx

from starling.adapters.services.base import StarlingService, build_url
from starling.core.domain.headers import FORM, JSON
from starling.core.domain.models import GrantType, HttpMethod, RequestDescriptor
from starling.core.validation import interface, literal, matching_alternative, union

_CLIENT = {"client_id": "string", "client_secret": "string"}

AUTHORIZATION_CODE = interface(
    {
        **_CLIENT,
        "grant_type": literal(GrantType.AUTHORIZATION_CODE),
        "code": "string",
        "redirect_uri": "string",
    },
    name="authorization_code_grant",
)
REFRESH_TOKEN = interface(
    {
        **_CLIENT,
        "grant_type": literal(GrantType.REFRESH_TOKEN),
        "refresh_token": "string",
    },
    name="refresh_token_grant",
)
TOKEN_GRANT = union([AUTHORIZATION_CODE, REFRESH_TOKEN], name="token_grant")


class OAuthService(StarlingService):
    service_name = "oauth"

    OAUTH_TOKEN = interface({"api_url": "string", "parameters": TOKEN_GRANT}, name="oauth_token")

    async def get_access_token(self, authorization_code: str | None = None) -> httpx.Response:
        """Intercambia el authorization code (obtenido tras el login del usuario)."""

        return await self.get_oauth_token(
            {
                "code": authorization_code,
                "grant_type": GrantType.AUTHORIZATION_CODE,
                "client_id": self._defaults.get("client_id"),
                "client_secret": self._defaults.get("client_secret"),
                "redirect_uri": self._defaults.get("redirect_uri"),
            }
        )

    async def refresh_access_token(self, refresh_token: str | None = None) -> httpx.Response:
        """Pide un access token nuevo cuando el actual ha expirado."""

        return await self.get_oauth_token(
            {
                "refresh_token": refresh_token,
                "grant_type": GrantType.REFRESH_TOKEN,
                "client_id": self._defaults.get("client_id"),
                "client_secret": self._defaults.get("client_secret"),
            }
        )

    def token_request(self, parameters: Mapping[str, Any], api_url: str | None = None) -> RequestDescriptor:
        checked = self.resolve(
            self.OAUTH_TOKEN,
            api_url=api_url,
            parameters={k: v for k, v in parameters.items() if v is not None},
        )
        grant = checked["parameters"]
        branch = matching_alternative(TOKEN_GRANT, grant)
        # Solo los campos de la rama que validó.
        keys = tuple(branch) if branch is not None else tuple(grant)
        form = {
            key: str(grant[key].value if isinstance(grant[key], Enum) else grant[key])
            for key in keys
        }
        return RequestDescriptor(
            method=HttpMethod.POST,
            url=build_url(checked["api_url"], "/oauth/access-token"),
            headers={"Content-Type": FORM, "Accept": JSON},
            form=form,
        )

    async def get_oauth_token(self, parameters: Mapping[str, Any], api_url: str | None = None) -> httpx.Response:
        return await self.send(self.token_request(parameters, api_url))
