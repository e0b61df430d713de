"""Settings loading for CLI commands.

Invalid `SWAPI_*` values are reported like any other failure: one message
on stderr and exit code 1, without a traceback.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from core.config import AppSettings


def load_settings(err_console: Console) -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        err_console.print("[bold red]Error:[/bold red] invalid configuration")
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            err_console.print(f"  SWAPI_{field.upper()}: {error['msg']}", markup=False, highlight=False)
        raise typer.Exit(code=1) from exc
