"""Servicios (una fachada por recurso de la API).

Cada módulo implementa las operaciones de un recurso sobre
`starling.core.interfaces.transport.Transport`.
"""

from starling.adapters.services.account import AccountService
from starling.adapters.services.account_holder import AccountHolderService
from starling.adapters.services.address import AddressService
from starling.adapters.services.base import StarlingService
from starling.adapters.services.card import CardService
from starling.adapters.services.feed_item import FeedItemService
from starling.adapters.services.identity import IdentityService
from starling.adapters.services.mandate import MandateService
from starling.adapters.services.oauth import OAuthService

__all__ = [
    "AccountHolderService",
    "AccountService",
    "AddressService",
    "CardService",
    "FeedItemService",
    "IdentityService",
    "MandateService",
    "OAuthService",
    "StarlingService",
]
