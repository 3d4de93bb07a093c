"""Servicio: mandatos de domiciliación (direct debit)."""

from __future__ import annotations

from typing import Any

import httpx

from starling.adapters.services.base import StarlingService
from starling.core.domain.models import HttpMethod
from starling.core.validation import MIN_API_PARAMETERS

_MANDATE_PATH = "/api/v2/direct-debit/mandates/{mandate_uid}"


class MandateService(StarlingService):
    service_name = "mandate"

    MANDATE = MIN_API_PARAMETERS.extend(name="mandate", mandate_uid="uuid")

    async def list_mandates(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/direct-debit/mandates", overrides)

    async def get_mandate(self, mandate_uid: str | None = None, **overrides: Any) -> httpx.Response:
        params = self.resolve(self.MANDATE, overrides, mandate_uid=mandate_uid)
        request = self.json_request(
            HttpMethod.GET,
            params,
            _MANDATE_PATH,
            segments={"mandate_uid": params["mandate_uid"]},
        )
        return await self.send(request)

    async def delete_mandate(self, mandate_uid: str | None = None, **overrides: Any) -> httpx.Response:
        """Cancela el mandato. Irreversible desde la API."""

        params = self.resolve(self.MANDATE, overrides, mandate_uid=mandate_uid)
        request = self.json_request(
            HttpMethod.DELETE,
            params,
            _MANDATE_PATH,
            segments={"mandate_uid": params["mandate_uid"]},
        )
        return await self.send(request)
