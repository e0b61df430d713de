from __future__ import annotations

import json

from adapters.json_exporter import export_person_info_json, person_info_to_json
from core.domain.models import PersonInfo
from swapi_fakes import EXPECTED_LUKE


def test_export_writes_utf8_json(tmp_path):
    info = PersonInfo.model_validate({**EXPECTED_LUKE, "name": "Padmé Amidala"})
    target = tmp_path / "reports" / "padme.json"

    path = export_person_info_json(person_info=info, output_path=target)

    assert path == target
    text = target.read_text(encoding="utf-8")
    assert "Padmé" in text
    assert json.loads(text)["name"] == "Padmé Amidala"


def test_json_keeps_field_order():
    info = PersonInfo.model_validate(EXPECTED_LUKE)

    payload = json.loads(person_info_to_json(info))

    assert list(payload) == ["name", "height", "gender", "homeworld", "films"]
    assert payload == EXPECTED_LUKE
