"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from rendering details.
- Lets several commands reuse the same panels/tables.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import KNOWN_GENDERS, PersonInfo


def print_banner(console: Console) -> None:
    """Print the welcome banner (interactive output only)."""

    title = Text("SWAPI Person", style="bold cyan")
    subtitle = Text("Person • Homeworld • Films", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_person_panel(info: PersonInfo) -> Panel:
    body = Text()
    body.append("Height: ", style="bold")
    body.append(f"{info.height}\n")
    body.append("Gender: ", style="bold")
    # Values outside the known set are shown as reported, dimmed.
    gender_style = "" if info.gender in KNOWN_GENDERS else "dim italic"
    body.append(f"{info.gender}\n", style=gender_style)
    body.append("Homeworld: ", style="bold")
    body.append(info.homeworld)
    return Panel(body, title=Text(info.name, style="bold yellow"), border_style="yellow")


def build_films_table(info: PersonInfo) -> Table:
    table = Table(title=f"Films ({len(info.films)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Director", style="white")
    table.add_column("Release date", style="magenta", no_wrap=True)
    for index, film in enumerate(info.films, start=1):
        table.add_row(str(index), film.title, film.director, film.release_date)
    return table
