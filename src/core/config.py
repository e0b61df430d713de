"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (HTTP) and services read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PERSON_URL = "https://swapi.dev/api/people/1/"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "swapi-person"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "swapi-person"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "swapi-person"
    return Path.home() / ".config" / "swapi-person"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without logic in the core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWAPI_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    person_url: str = Field(
        default=DEFAULT_PERSON_URL,
        min_length=8,
        description="Endpoint of the person to aggregate (Luke Skywalker by default).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="swapi-person/0.1 (+https://swapi.dev)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(debug|info|warning|error|critical)$",
        description="Log level for the CLI (DEBUG shows every request).",
    )
