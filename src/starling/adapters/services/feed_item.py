"""Servicio: feed de movimientos por cuenta y categoría."""

from __future__ import annotations

from typing import Any

import httpx

from starling.adapters.services.base import StarlingService
from starling.core.domain.models import HttpMethod
from starling.core.validation import MIN_API_PARAMETERS

_CATEGORY_PATH = "/api/v2/feed/account/{account_uid}/category/{category_uid}"


class FeedItemService(StarlingService):
    service_name = "feed_item"

    CATEGORY = MIN_API_PARAMETERS.extend(name="feed_category", account_uid="uuid", category_uid="uuid")
    BETWEEN = CATEGORY.extend(
        name="feed_items_between",
        min_transaction_timestamp="timestamp",
        max_transaction_timestamp="timestamp",
    )
    ITEM = CATEGORY.extend(name="feed_item", feed_item_uid="uuid")
    CHANGED_SINCE = CATEGORY.extend(name="feed_items_changed_since", changes_since="timestamp")

    async def get_feed_items_between(
        self,
        account_uid: str | None = None,
        category_uid: str | None = None,
        min_transaction_timestamp: str | None = None,
        max_transaction_timestamp: str | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        params = self.resolve(
            self.BETWEEN,
            overrides,
            account_uid=account_uid,
            category_uid=category_uid,
            min_transaction_timestamp=min_transaction_timestamp,
            max_transaction_timestamp=max_transaction_timestamp,
        )
        request = self.json_request(
            HttpMethod.GET,
            params,
            _CATEGORY_PATH + "/transactions-between",
            segments={"account_uid": params["account_uid"], "category_uid": params["category_uid"]},
            query_params={
                "minTransactionTimestamp": params["min_transaction_timestamp"],
                "maxTransactionTimestamp": params["max_transaction_timestamp"],
            },
        )
        return await self.send(request)

    async def get_feed_item(
        self,
        account_uid: str | None = None,
        category_uid: str | None = None,
        feed_item_uid: str | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        params = self.resolve(
            self.ITEM,
            overrides,
            account_uid=account_uid,
            category_uid=category_uid,
            feed_item_uid=feed_item_uid,
        )
        request = self.json_request(
            HttpMethod.GET,
            params,
            _CATEGORY_PATH + "/{feed_item_uid}",
            segments={
                "account_uid": params["account_uid"],
                "category_uid": params["category_uid"],
                "feed_item_uid": params["feed_item_uid"],
            },
        )
        return await self.send(request)

    async def get_feed_items_changed_since(
        self,
        account_uid: str | None = None,
        category_uid: str | None = None,
        changes_since: str | None = None,
        **overrides: Any,
    ) -> httpx.Response:
        """Movimientos creados o actualizados desde `changes_since`."""

        params = self.resolve(
            self.CHANGED_SINCE,
            overrides,
            account_uid=account_uid,
            category_uid=category_uid,
            changes_since=changes_since,
        )
        request = self.json_request(
            HttpMethod.GET,
            params,
            _CATEGORY_PATH,
            segments={"account_uid": params["account_uid"], "category_uid": params["category_uid"]},
            query_params={"changesSince": params["changes_since"]},
        )
        return await self.send(request)
