"""CLI (typer + rich) sobre el SDK."""
