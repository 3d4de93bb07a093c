"""Servicio: identidad del token y del individuo que autoriza."""

from __future__ import annotations

from typing import Any

import httpx

from starling.adapters.services.base import StarlingService


class IdentityService(StarlingService):
    service_name = "identity"

    async def get_token_identity(self, **overrides: Any) -> httpx.Response:
        """Identidad asociada al token actual (scopes, expiración...)."""

        return await self._simple_get("/api/v2/identity/token", overrides)

    async def get_authorising_individual(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/identity/individual", overrides)
