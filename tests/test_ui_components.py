from __future__ import annotations

from rich.console import Console

from cli.ui_components import build_films_table, build_person_panel
from core.domain.models import PersonInfo
from swapi_fakes import EXPECTED_LUKE


def _gender_styles(info: PersonInfo) -> list[str]:
    body = build_person_panel(info).renderable
    gender_start = body.plain.index(info.gender, body.plain.index("Gender: "))
    return [str(span.style) for span in body.spans if span.start == gender_start]


def test_known_gender_is_plain():
    info = PersonInfo.model_validate(EXPECTED_LUKE)

    assert _gender_styles(info) == []


def test_unknown_gender_is_dimmed():
    info = PersonInfo.model_validate({**EXPECTED_LUKE, "name": "R2-D2", "gender": "n/a"})

    assert _gender_styles(info) == ["dim italic"]


def test_films_table_lists_every_film_in_order():
    info = PersonInfo.model_validate(EXPECTED_LUKE)
    console = Console(record=True, width=120)

    console.print(build_films_table(info))
    text = console.export_text()

    assert "Films (2)" in text
    assert text.index("A New Hope") < text.index("The Empire Strikes Back")
