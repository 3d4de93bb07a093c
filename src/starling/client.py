"""Cliente de alto nivel.

Compone todos los servicios sobre una única config (solo lectura) y un único
transporte. Orden de precedencia de la config:
defaults del SDK < `StarlingSettings` (env/.env) < kwargs del constructor <
kwargs de cada llamada.
"""

from __future__ import annotations

from typing import Any, Mapping

from starling.adapters.http_client import HttpxTransport
from starling.adapters.services import (
    AccountHolderService,
    AccountService,
    AddressService,
    CardService,
    FeedItemService,
    IdentityService,
    MandateService,
    OAuthService,
)
from starling.core.config import DEFAULT_API_URL, StarlingSettings
from starling.core.interfaces.transport import Transport
from starling.core.params import freeze, merge_params

SDK_DEFAULTS: Mapping[str, Any] = freeze(
    {
        "api_url": DEFAULT_API_URL,
        "client_id": "",
        "client_secret": "",
    }
)


class StarlingClient:
    """Punto de entrada: `client.account.get_accounts()`, `client.card.update_card_lock(...)`..."""

    def __init__(
        self,
        settings: StarlingSettings | None = None,
        *,
        transport: Transport | None = None,
        **options: Any,
    ) -> None:
        self.settings = settings or StarlingSettings()
        self.config = freeze(merge_params(SDK_DEFAULTS, self.settings.to_defaults(), options))

        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(self.settings)

        self.identity = IdentityService(self.config, transport=self.transport)
        self.account_holder = AccountHolderService(self.config, transport=self.transport)
        self.account = AccountService(self.config, transport=self.transport)
        self.address = AddressService(self.config, transport=self.transport)
        self.feed_item = FeedItemService(self.config, transport=self.transport)
        self.card = CardService(self.config, transport=self.transport)
        self.mandate = MandateService(self.config, transport=self.transport)
        self.oauth = OAuthService(self.config, transport=self.transport)

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self.transport, HttpxTransport):
            await self.transport.aclose()

    async def __aenter__(self) -> "StarlingClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
