"""
Shared pytest fixtures.

Services are exercised against a recording transport, so no request ever
leaves the process.
"""
from __future__ import annotations

import httpx
import pytest

from starling.client import StarlingClient
from starling.core.config import StarlingSettings
from starling.core.domain.models import RequestDescriptor

API_URL = "https://api.example.test"
TOKEN = "test-token"
ACCOUNT_UID = "550e8400-e29b-41d4-a716-446655440000"
CATEGORY_UID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
FEED_ITEM_UID = "6ba7b811-9dad-11d1-80b4-00c04fd430c8"
CARD_UID = "f47ac10b-58cc-4372-a567-0e02b2c3d479"
MANDATE_UID = "9b2e4f6a-1c3d-4e5f-8a7b-0c1d2e3f4a5b"


class RecordingTransport:
    """Transport stub: stores every descriptor and answers 200 {}."""

    def __init__(self, payload: dict | None = None) -> None:
        self.requests: list[RequestDescriptor] = []
        self.payload = payload if payload is not None else {}

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            200,
            json=self.payload,
            request=httpx.Request(request.method.value, request.url),
        )

    @property
    def last(self) -> RequestDescriptor:
        return self.requests[-1]


@pytest.fixture
def settings(monkeypatch) -> StarlingSettings:
    for key in ("STARLING_ACCESS_TOKEN", "STARLING_ACCOUNT_UID", "STARLING_API_URL"):
        monkeypatch.delenv(key, raising=False)
    return StarlingSettings(_env_file=None)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def defaults() -> dict:
    return {"api_url": API_URL, "access_token": TOKEN}


@pytest.fixture
def client(settings, transport) -> StarlingClient:
    return StarlingClient(
        settings,
        transport=transport,
        api_url=API_URL,
        access_token=TOKEN,
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="https://app.example.test/callback",
    )
