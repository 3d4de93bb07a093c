"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from starling.core.errors import ValidationError


def format_amount(amount: dict[str, Any] | None) -> str:
    """`{"currency": "GBP", "minorUnits": 1234}` -> `12.34 GBP`."""

    if not isinstance(amount, dict):
        return "-"
    minor = amount.get("minorUnits")
    currency = amount.get("currency") or ""
    if not isinstance(minor, int):
        return "-"
    sign = "-" if minor < 0 else ""
    major, cents = divmod(abs(minor), 100)
    return f"{sign}{major}.{cents:02d} {currency}".strip()


def build_accounts_table(payload: dict[str, Any]) -> Table:
    table = Table(title="Accounts")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Account UID", style="white")
    table.add_column("Type", style="magenta")
    table.add_column("Currency", style="green")
    table.add_column("Default category", style="dim")
    for account in payload.get("accounts") or []:
        table.add_row(
            str(account.get("name") or ""),
            str(account.get("accountUid") or ""),
            str(account.get("accountType") or ""),
            str(account.get("currency") or ""),
            str(account.get("defaultCategory") or ""),
        )
    return table


def build_balance_table(payload: dict[str, Any]) -> Table:
    table = Table(title="Balance")
    table.add_column("Balance", style="cyan", no_wrap=True)
    table.add_column("Amount", style="white", justify="right")
    rows = (
        ("Cleared", "clearedBalance"),
        ("Effective", "effectiveBalance"),
        ("Pending", "pendingTransactions"),
        ("Accepted overdraft", "acceptedOverdraft"),
        ("Total cleared", "totalClearedBalance"),
        ("Total effective", "totalEffectiveBalance"),
    )
    for label, key in rows:
        if key in payload:
            table.add_row(label, format_amount(payload.get(key)))
    return table


def build_mandates_table(payload: dict[str, Any]) -> Table:
    table = Table(title="Direct debit mandates")
    table.add_column("Originator", style="cyan")
    table.add_column("Reference", style="white")
    table.add_column("Status", style="green")
    table.add_column("Created", style="dim")
    table.add_column("Mandate UID", style="magenta")
    for mandate in payload.get("mandates") or []:
        table.add_row(
            str(mandate.get("originatorName") or ""),
            str(mandate.get("reference") or ""),
            str(mandate.get("status") or ""),
            str(mandate.get("created") or ""),
            str(mandate.get("uid") or ""),
        )
    return table


def build_validation_panel(error: ValidationError) -> Panel:
    """Panel con cada violación de parámetros."""

    body = Text()
    for issue in error.issues:
        body.append(f"- {issue.field}", style="bold")
        body.append(f": {issue.message}\n")
    return Panel(body, title=Text("Invalid parameters", style="bold red"), border_style="red")
