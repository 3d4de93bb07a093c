"""Headers comunes de la API."""

from __future__ import annotations

JSON = "application/json"
FORM = "application/x-www-form-urlencoded"


def default_headers(access_token: str) -> dict[str, str]:
    return {
        "Accept": JSON,
        "Authorization": f"Bearer {access_token}",
    }


def payload_headers(access_token: str) -> dict[str, str]:
    """Headers para operaciones que envían un body JSON."""

    return {
        **default_headers(access_token),
        "Content-Type": JSON,
    }
