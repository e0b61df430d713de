from __future__ import annotations

import pytest

from core.config import AppSettings
from swapi_fakes import PERSON_URL


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, person_url=PERSON_URL)
