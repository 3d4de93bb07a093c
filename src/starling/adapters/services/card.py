"""Servicio: tarjetas y sus controles.

Los siete `update_card_*` son variantes de una única operación
(`update_card_control`) que solo cambian el último segmento del path.
"""

from __future__ import annotations

from typing import Any

import httpx

from starling.adapters.services.base import StarlingService
from starling.core.domain.models import CardControl, HttpMethod
from starling.core.validation import MIN_API_PARAMETERS, enum


class CardService(StarlingService):
    service_name = "card"

    CARD_CONTROL = MIN_API_PARAMETERS.extend(
        name="card_control",
        card_uid="uuid",
        enabled="boolean",
        control=enum(CardControl),
    )

    async def get_cards(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/cards", overrides)

    async def update_card_control(
        self,
        card_uid: str | None = None,
        enabled: bool | None = None,
        control: CardControl | str | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        """PUT `{"enabled": bool}` sobre `/cards/{cardUid}/controls/{control}`."""

        params = self.resolve(
            self.CARD_CONTROL,
            overrides,
            card_uid=card_uid,
            enabled=enabled,
            control=control,
        )
        request = self.json_request(
            HttpMethod.PUT,
            params,
            "/api/v2/cards/{card_uid}/controls/{control}",
            segments={"card_uid": params["card_uid"], "control": CardControl(params["control"])},
            body={"enabled": params["enabled"]},
        )
        return await self.send(request)

    async def _update_fixed_control(
        self,
        control: CardControl,
        card_uid: str | None,
        enabled: bool | None,
        overrides: dict[str, Any],
    ) -> httpx.Response:
        # La variante fija el control: un `control` en overrides no cuenta.
        overrides.pop("control", None)
        return await self.update_card_control(card_uid, enabled, control, **overrides)

    async def update_card_lock(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        """`enabled=False` bloquea la tarjeta, `True` la desbloquea."""

        return await self._update_fixed_control(CardControl.LOCK, card_uid, enabled, overrides)

    async def update_card_atm_control(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        return await self._update_fixed_control(CardControl.ATM, card_uid, enabled, overrides)

    async def update_card_online_control(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        return await self._update_fixed_control(CardControl.ONLINE, card_uid, enabled, overrides)

    async def update_card_mobile_wallet_control(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        return await self._update_fixed_control(CardControl.MOBILE_WALLET, card_uid, enabled, overrides)

    async def update_card_gambling_control(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        return await self._update_fixed_control(CardControl.GAMBLING, card_uid, enabled, overrides)

    async def update_card_present_control(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        """Pagos con tarjeta presente (contactless y chip & PIN)."""

        return await self._update_fixed_control(CardControl.CARD_PRESENT, card_uid, enabled, overrides)

    async def update_card_magstripe_control(self, card_uid: str | None = None, enabled: bool | None = None, **overrides: Any) -> httpx.Response:
        return await self._update_fixed_control(CardControl.MAGSTRIPE, card_uid, enabled, overrides)
