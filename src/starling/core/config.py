"""Configuración del SDK.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los
  servicios: estos solo reciben un mapping de defaults de solo lectura.
- La CLI y el cliente leen la misma configuración de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.starlingbank.com"
SANDBOX_API_URL = "https://api-sandbox.starlingbank.com"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "starling-sdk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "starling-sdk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "starling-sdk"
    return Path.home() / ".config" / "starling-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# starling-sdk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    try:
        # Contiene secretos: solo lectura para el usuario.
        env_path.chmod(0o600)
    except OSError:
        pass
    return env_path


class StarlingSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para cliente/CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="STARLING_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=DEFAULT_API_URL,
        min_length=8,
        description="Base URL de la API (producción o sandbox).",
    )
    client_id: str = Field(
        default="",
        description="OAuth client id de la aplicación.",
    )
    client_secret: str = Field(
        default="",
        repr=False,
        description="OAuth client secret de la aplicación.",
    )
    redirect_uri: str | None = Field(
        default=None,
        description="Redirect URI registrada para el flujo authorization_code.",
    )
    access_token: str | None = Field(
        default=None,
        repr=False,
        description="Bearer token (personal access token o token OAuth).",
    )
    account_uid: str | None = Field(
        default=None,
        description="Cuenta por defecto para operaciones de cuenta/feed.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="starling-sdk/0.1",
        min_length=1,
        description="User-Agent de las peticiones.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG muestra cada request).",
    )
    log_json: bool = Field(
        default=False,
        description="Renderizar logs como JSON (pipelines) en lugar de consola.",
    )

    def to_defaults(self) -> dict[str, Any]:
        """Defaults de servicio: solo los parámetros de API con valor."""

        values = {
            "api_url": self.api_url.rstrip("/"),
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "access_token": self.access_token,
            "account_uid": self.account_uid,
        }
        return {k: v for k, v in values.items() if v is not None}
