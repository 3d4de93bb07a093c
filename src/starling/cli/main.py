"""CLI principal.

Por qué una CLI en un SDK:
- Diagnóstico rápido de credenciales (`doctor`).
- Consultas de solo lectura sin escribir código (cuentas, saldo, mandatos,
  extractos).
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import httpx
import typer
from rich.console import Console

from starling.cli import doctor
from starling.cli.ui_components import (
    build_accounts_table,
    build_balance_table,
    build_mandates_table,
    build_validation_panel,
)
from starling.client import StarlingClient
from starling.core.config import StarlingSettings
from starling.core.domain.models import ResponseType, StatementFormat
from starling.core.errors import ValidationError
from starling.core.logging import configure_logging

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Starling Bank API from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (DEBUG)."),
) -> None:
    settings = StarlingSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, json=settings.log_json)


def _execute(call: Callable[[StarlingClient], Awaitable[T]]) -> T:
    """Ejecuta `call` con un cliente nuevo y traduce errores a códigos de salida."""

    async def runner() -> T:
        async with StarlingClient() as client:
            return await call(client)

    try:
        return asyncio.run(runner())
    except ValidationError as exc:
        _console.print(build_validation_panel(exc))
        raise typer.Exit(code=2) from exc
    except httpx.HTTPStatusError as exc:
        _console.print(f"[red]API error:[/red] HTTP {exc.response.status_code} {exc.request.url}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _console.print(f"[red]Transport error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _json(response: httpx.Response) -> dict[str, Any]:
    response.raise_for_status()
    data = response.json()
    return data if isinstance(data, dict) else {}


@app.command()
def accounts() -> None:
    """List the account holder's accounts."""

    async def call(client: StarlingClient) -> dict[str, Any]:
        return _json(await client.account.get_accounts())

    _console.print(build_accounts_table(_execute(call)))


@app.command()
def balance(
    account_uid: str | None = typer.Option(None, "--account-uid", help="Defaults to STARLING_ACCOUNT_UID."),
) -> None:
    """Show an account balance."""

    async def call(client: StarlingClient) -> dict[str, Any]:
        return _json(await client.account.get_account_balance(account_uid))

    _console.print(build_balance_table(_execute(call)))


@app.command()
def mandates() -> None:
    """List direct debit mandates."""

    async def call(client: StarlingClient) -> dict[str, Any]:
        return _json(await client.mandate.list_mandates())

    _console.print(build_mandates_table(_execute(call)))


@app.command()
def statement(
    output: Path = typer.Option(..., "--output", "-o", help="Destination file."),
    account_uid: str | None = typer.Option(None, "--account-uid", help="Defaults to STARLING_ACCOUNT_UID."),
    year_month: str | None = typer.Option(None, "--year-month", help="yyyy-MM (defaults to the current month)."),
    pdf: bool = typer.Option(False, "--pdf", help="Download as PDF instead of CSV."),
) -> None:
    """Download the statement for a month."""

    statement_format = StatementFormat.PDF if pdf else StatementFormat.CSV

    async def call(client: StarlingClient) -> int:
        response = await client.account.get_statement_for_period(
            account_uid,
            year_month=year_month,
            format=statement_format,
            response_type=ResponseType.STREAM,
        )
        written = 0
        try:
            response.raise_for_status()
            output.parent.mkdir(parents=True, exist_ok=True)
            with output.open("wb") as fh:
                async for chunk in response.aiter_bytes():
                    fh.write(chunk)
                    written += len(chunk)
        finally:
            await response.aclose()
        return written

    written = _execute(call)
    _console.print(f"[green]Saved statement ({written} bytes) to:[/green] {output}")


def run() -> None:
    app()
