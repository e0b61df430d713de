from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_PERSON_URL, AppSettings, get_user_config_dir


def test_defaults_point_at_luke_skywalker(monkeypatch):
    monkeypatch.delenv("SWAPI_PERSON_URL", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.person_url == DEFAULT_PERSON_URL
    assert settings.http_timeout_seconds > 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SWAPI_PERSON_URL", "https://swapi.dev/api/people/4/")
    monkeypatch.setenv("SWAPI_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SWAPI_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.person_url == "https://swapi.dev/api/people/4/"
    assert settings.http_timeout_seconds == 2.5
    assert settings.log_level == "debug"


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("SWAPI_USER_AGENT=from-env-file/1.0\n", encoding="utf-8")

    settings = AppSettings(_env_file=env_file)

    assert settings.user_agent == "from-env-file/1.0"


@pytest.mark.parametrize("field, value", [("http_timeout_seconds", 0), ("log_level", "verbose")])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **{field: value})


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "swapi-person"
