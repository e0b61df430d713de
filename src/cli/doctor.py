"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.settings_loader import load_settings
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()
_err_console = Console(stderr=True)


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Show the effective settings and check connectivity to the API."""

    settings = load_settings(_err_console)

    table = Table(title="SWAPI Person Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Person URL", "OK", settings.person_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level.upper())
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity
    ok_http, detail_http = asyncio.run(_check_http(settings.person_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)
