"""Load API settings from config/settings.yaml and the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

from jobhub.errors import ConfigError
from jobhub.log import get_logger

log = get_logger(__name__)

load_dotenv()

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"

# Environment variables win over the YAML file.
_ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "api_key": ("JSEARCH_API_KEY", "RAPIDAPI_KEY"),
    "api_host": ("JSEARCH_API_HOST",),
    "base_url": ("JSEARCH_BASE_URL",),
    "timeout": ("JSEARCH_TIMEOUT",),
}


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_host: str = "jsearch.p.rapidapi.com"
    base_url: str = "https://jsearch.p.rapidapi.com"
    search_country: str = "in"
    detail_country: str = "us"
    date_posted: str = "all"
    default_query: str = "developer jobs in kerala"
    timeout: float = 15.0
    max_workers: int = 4

    def __repr__(self) -> str:
        masked = replace(self, api_key="***" if self.api_key else "")
        body = ", ".join(f"{f.name}={getattr(masked, f.name)!r}" for f in fields(self))
        return f"Settings({body})"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        log.debug("No settings file at %s, using defaults", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping, got {type(data).__name__}")
    # Accept both a flat file and one nested under "jsearch:"
    return dict(data.get("jsearch", data))


def load_settings(
    path: Path | None = None,
    env_getter: Callable[[str], str] = get_env,
) -> Settings:
    """Resolve settings: defaults, then YAML, then environment.

    The API key is only ever taken from the file or the environment and a
    missing key raises ``ConfigError``.
    """
    known = {f.name for f in fields(Settings)}
    values: dict[str, Any] = {}

    for key, value in _read_yaml(path or SETTINGS_PATH).items():
        if key not in known:
            log.warning("Ignoring unknown setting %r", key)
            continue
        values[key] = value

    for key, names in _ENV_OVERRIDES.items():
        for name in names:
            env_value = env_getter(name)
            if env_value:
                values[key] = env_value
                break

    if not values.get("api_key"):
        raise ConfigError("No API key configured — set JSEARCH_API_KEY in .env")

    try:
        values["timeout"] = float(values.get("timeout", Settings.timeout))
        values["max_workers"] = int(values.get("max_workers", Settings.max_workers))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid numeric setting: {exc}") from exc
    if values["timeout"] <= 0:
        raise ConfigError("timeout must be positive")
    if values["max_workers"] < 1:
        raise ConfigError("max_workers must be at least 1")

    for key in known - {"timeout", "max_workers"}:
        if key in values:
            values[key] = str(values[key]).strip()
    values["base_url"] = values.get("base_url", Settings.base_url).rstrip("/")

    settings = Settings(**values)
    log.debug("Loaded %r", settings)
    return settings
