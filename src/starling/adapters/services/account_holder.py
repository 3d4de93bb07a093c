"""Servicio: titular de la cuenta.

Todas las operaciones son GET sin parámetros propios (solo api_url + token).
"""

from __future__ import annotations

from typing import Any

import httpx

from starling.adapters.services.base import StarlingService


class AccountHolderService(StarlingService):
    service_name = "account_holder"

    async def get_account_holder(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder", overrides)

    async def get_account_holder_name(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder/name", overrides)

    async def get_account_holder_individual(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder/individual", overrides)

    async def get_account_holder_joint(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder/joint", overrides)

    async def get_account_holder_business(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder/business", overrides)

    async def get_account_holder_business_registered_address(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder/business/registered-address", overrides)

    async def get_account_holder_business_correspondence_address(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/account-holder/business/correspondence-address", overrides)
