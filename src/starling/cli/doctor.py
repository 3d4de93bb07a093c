"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from starling.adapters.http_client import build_async_client
from starling.core.config import DEFAULT_API_URL, SANDBOX_API_URL, StarlingSettings, write_user_env_vars
from starling.core.validation.field_types import is_uuid

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: StarlingSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = StarlingSettings()

    table = Table(title="Starling SDK Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API URL", "OK", settings.api_url)
    if settings.access_token:
        table.add_row("Access token", "OK", "Set (value hidden)")
    else:
        table.add_row("Access token", "MISSING", "Set STARLING_ACCESS_TOKEN or run `starling doctor setup`")

    if settings.client_id and settings.client_secret:
        table.add_row("OAuth client", "OK", settings.client_id)
    else:
        table.add_row("OAuth client", "OPTIONAL", "Only needed for token exchange")

    if settings.account_uid is None:
        table.add_row("Default account", "OPTIONAL", "Pass --account-uid per command")
    elif is_uuid(settings.account_uid):
        table.add_row("Default account", "OK", settings.account_uid)
    else:
        table.add_row("Default account", "FAIL", f"Not a UUID: {settings.account_uid}")

    if not offline:
        ok_http, detail_http = asyncio.run(_check_http(settings.api_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores credentials in the user config .env)."""

    environment = typer.prompt(
        "Environment (production/sandbox)",
        default="sandbox",
        show_default=True,
    ).strip().lower()

    presets = {
        "production": DEFAULT_API_URL,
        "sandbox": SANDBOX_API_URL,
    }
    api_url = typer.prompt("API URL", default=presets.get(environment, ""), show_default=True).strip()
    access_token = typer.prompt("Access token", hide_input=True, confirmation_prompt=False).strip()
    account_uid = typer.prompt("Default account UID (optional)", default="", show_default=False).strip()

    if not api_url or not access_token:
        raise typer.BadParameter("api_url and access_token are required")
    if account_uid and not is_uuid(account_uid):
        raise typer.BadParameter("account UID must be a UUID")

    env_path = write_user_env_vars(
        {
            "STARLING_API_URL": api_url,
            "STARLING_ACCESS_TOKEN": access_token,
            "STARLING_ACCOUNT_UID": account_uid or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
