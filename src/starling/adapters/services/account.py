"""Servicio: cuentas del titular (saldos, identificadores, extractos)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import httpx

from starling.adapters.services.base import StarlingService, query
from starling.core.domain.models import HttpMethod, ResponseType, StatementFormat
from starling.core.validation import MIN_API_PARAMETERS, enum


def current_year_month() -> str:
    """Mes natural actual en UTC (`yyyy-MM`)."""

    return datetime.now(timezone.utc).strftime("%Y-%m")


class AccountService(StarlingService):
    service_name = "account"

    ACCOUNT = MIN_API_PARAMETERS.extend(name="account", account_uid="uuid")
    CONFIRMATION_OF_FUNDS = ACCOUNT.extend(
        name="confirmation_of_funds",
        target_amount_in_minor_units="number",
    )
    STATEMENT_FOR_PERIOD = ACCOUNT.extend(
        name="statement_for_period",
        year_month="yearMonth",
        format=enum(StatementFormat),
        response_type=enum(ResponseType),
    )
    STATEMENT_FOR_RANGE = ACCOUNT.extend(
        name="statement_for_range",
        start="date",
        end="date?",
        format=enum(StatementFormat),
        response_type=enum(ResponseType),
    )

    async def get_accounts(self, **overrides: Any) -> httpx.Response:
        return await self._simple_get("/api/v2/accounts", overrides)

    async def _account_get(self, suffix: str, account_uid: str | None, overrides: dict[str, Any]) -> httpx.Response:
        params = self.resolve(self.ACCOUNT, overrides, account_uid=account_uid)
        request = self.json_request(
            HttpMethod.GET,
            params,
            "/api/v2/accounts/{account_uid}" + suffix,
            segments={"account_uid": params["account_uid"]},
        )
        return await self.send(request)

    async def get_account_identifiers(self, account_uid: str | None = None, **overrides: Any) -> httpx.Response:
        return await self._account_get("/identifiers", account_uid, overrides)

    async def get_account_balance(self, account_uid: str | None = None, **overrides: Any) -> httpx.Response:
        return await self._account_get("/balance", account_uid, overrides)

    async def get_statement_periods(self, account_uid: str | None = None, **overrides: Any) -> httpx.Response:
        return await self._account_get("/statement/available-periods", account_uid, overrides)

    async def get_confirmation_of_funds(
        self,
        account_uid: str | None = None,
        target_amount_in_minor_units: int | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        """¿Hay saldo suficiente para `target_amount_in_minor_units`?"""

        params = self.resolve(
            self.CONFIRMATION_OF_FUNDS,
            overrides,
            account_uid=account_uid,
            target_amount_in_minor_units=target_amount_in_minor_units,
        )
        request = self.json_request(
            HttpMethod.GET,
            params,
            "/api/v2/accounts/{account_uid}/confirmation-of-funds",
            segments={"account_uid": params["account_uid"]},
            query_params={"targetAmountInMinorUnits": params["target_amount_in_minor_units"]},
        )
        return await self.send(request)

    async def get_statement_for_period(
        self,
        account_uid: str | None = None,
        year_month: str | None = None,
        format: StatementFormat | str | None = None,
        response_type: ResponseType | str | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        """Descarga el extracto de un mes.

        Por defecto: mes actual (UTC), CSV y respuesta en streaming. La
        respuesta en streaming queda abierta; el caller debe cerrarla.
        """

        params = self.resolve(
            self.STATEMENT_FOR_PERIOD,
            overrides,
            fallbacks={
                "year_month": current_year_month(),
                "format": StatementFormat.CSV,
                "response_type": ResponseType.STREAM,
            },
            account_uid=account_uid,
            year_month=year_month,
            format=format,
            response_type=response_type,
        )
        request = self.json_request(
            HttpMethod.GET,
            params,
            "/api/v2/accounts/{account_uid}/statement/download",
            segments={"account_uid": params["account_uid"]},
            query_params={"yearMonth": params["year_month"]},
            accept=StatementFormat(params["format"]).value,
            response_type=ResponseType(params["response_type"]),
        )
        return await self.send(request)

    async def get_statement_for_range(
        self,
        account_uid: str | None = None,
        start: str | None = None,
        end: str | None = None,
        format: StatementFormat | str | None = None,
        response_type: ResponseType | str | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        """Descarga el extracto entre `start` y `end` (opcional), ambos `yyyy-MM-dd`."""

        params = self.resolve(
            self.STATEMENT_FOR_RANGE,
            overrides,
            fallbacks={
                "format": StatementFormat.CSV,
                "response_type": ResponseType.STREAM,
            },
            account_uid=account_uid,
            start=start,
            end=end,
            format=format,
            response_type=response_type,
        )
        request = self.json_request(
            HttpMethod.GET,
            params,
            "/api/v2/accounts/{account_uid}/statement/downloadForDateRange",
            segments={"account_uid": params["account_uid"]},
            query_params=query(start=params["start"], end=params.get("end")),
            accept=StatementFormat(params["format"]).value,
            response_type=ResponseType(params["response_type"]),
        )
        return await self.send(request)
