"""Command line interface (Typer + Rich).

Why the CLI stays thin:
- All fetching/aggregation lives in `core.services.person_aggregator`.
- This module only parses options, configures logging and renders output.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_person_info_json, person_info_to_json
from cli import doctor
from cli.settings_loader import load_settings
from cli.ui_components import build_films_table, build_person_panel, print_banner
from core.errors import SwapiError
from core.services.person_aggregator import AggregationStrategy, get_person_info

app = typer.Typer(
    no_args_is_help=True,
    help="Fetch a Star Wars person with its homeworld and films resolved.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Route stdlib logging through Rich on stderr."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.command()
def fetch(
    url: str | None = typer.Option(
        None,
        "--url",
        help="Person endpoint (defaults to SWAPI_PERSON_URL or Luke Skywalker).",
    ),
    strategy: AggregationStrategy = typer.Option(
        AggregationStrategy.default(),
        "--strategy",
        "-s",
        case_sensitive=False,
        help="Concurrency idiom used for the fan-out requests.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the record to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (DEBUG)."),
) -> None:
    """Fetch a person and resolve its homeworld and films."""

    settings = load_settings(_err_console)
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        info = asyncio.run(get_person_info(settings=settings, url=url, strategy=strategy))
    except SwapiError as exc:
        _err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(person_info_to_json(info))
    else:
        print_banner(_console)
        _console.print(build_person_panel(info))
        _console.print(build_films_table(info))

    if output is not None:
        path = export_person_info_json(person_info=info, output_path=output)
        _err_console.print(f"[green]Saved JSON to:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
