"""JSON export of the aggregated record.

Why JSON:
- Interoperability with other tools and pipelines.
- Keeps a copy of the result without depending on the terminal rendering.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import PersonInfo


def person_info_to_json(person_info: PersonInfo) -> str:
    """Serialize `PersonInfo` as stable, human-readable JSON."""

    payload = person_info.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2)


def export_person_info_json(*, person_info: PersonInfo, output_path: Path) -> Path:
    """Export `PersonInfo` to a UTF-8 JSON file."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(person_info_to_json(person_info) + "\n", encoding="utf-8")
    return output_path
