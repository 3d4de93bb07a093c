"""Servicio: direcciones del cliente."""

from __future__ import annotations

from typing import Any

import httpx

from starling.adapters.services.base import StarlingService


class AddressService(StarlingService):
    service_name = "address"

    async def get_addresses(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/addresses", overrides)
