"""
Configuration management using Dynaconf and Pydantic.

Dynaconf loads settings from the user's `settings.toml` and `SCT_*`
environment variables. Pydantic then validates the merged data and provides
a typed `TrackerSettings` object.

The `get_settings` function caches a single instance of the settings;
`reset_settings` clears it so the next call reloads from disk.
"""

import json
import os
from pathlib import Path
from typing import Optional

import toml
from dynaconf import Dynaconf
from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.console import Console

from .categories import Category, parse_category
from .errors import UnknownCategoryError

console = Console()

APP_NAME = "CodeSourceTracker"

# Per-user config directory, e.g. ~/.config/CodeSourceTracker on Linux
USER_CONFIG_DIR = Path(user_config_dir(APP_NAME, appauthor=False))
USER_SETTINGS_FILE = USER_CONFIG_DIR / "settings.toml"
DEFAULT_STATS_FILE = USER_CONFIG_DIR / "stats.json"

settings_loader = Dynaconf(
    envvar_prefix="SCT",
    settings_files=[str(USER_SETTINGS_FILE)],
    environments=False,
    load_dotenv=False,
)


class TrackerSettings(BaseModel):
    """A Pydantic model that defines and validates all application settings."""

    stats_path: Path = Field(default_factory=lambda: DEFAULT_STATS_FILE)
    # Preselected answer of the classification prompt; never applied silently.
    default_source: Optional[Category] = None

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("stats_path", mode="before")
    @classmethod
    def _expand_path(cls, v):
        return Path(str(v)).expanduser() if v is not None else v

    @field_validator("default_source", mode="before")
    @classmethod
    def _parse_source(cls, v):
        if v is None or isinstance(v, Category) or v == "":
            return v or None
        try:
            return parse_category(str(v))
        except UnknownCategoryError as e:
            raise ValueError(str(e)) from e


_settings_instance: Optional[TrackerSettings] = None


def get_settings() -> TrackerSettings:
    """Get the application settings, loading them on first use.

    Honors SCT_SETTINGS_PATH when set: a JSON file used instead of the user
    TOML settings (tests and isolated runs). SCT_STATS_PATH always wins for
    the stats file location.
    """
    global _settings_instance
    if _settings_instance is None:
        config_dict = {}

        env_settings_path = os.getenv("SCT_SETTINGS_PATH")
        if env_settings_path:
            p = Path(env_settings_path)
            if p.exists():
                try:
                    config_dict.update(json.loads(p.read_text(encoding="utf-8")) or {})
                except (OSError, ValueError) as e:
                    console.print(f"[yellow]Ignoring unreadable settings file {p}:[/yellow] {e}")
        else:
            dc_dict = settings_loader.as_dict() or {}
            config_dict.update({str(k).lower(): v for k, v in dc_dict.items()})

        env_stats = os.getenv("SCT_STATS_PATH")
        if env_stats:
            config_dict["stats_path"] = env_stats

        try:
            _settings_instance = TrackerSettings(
                **{k: v for k, v in config_dict.items() if k in TrackerSettings.model_fields}
            )
        except ValidationError as e:
            console.print(f"[red]Configuration error:[/red]\n{e}")
            raise

    return _settings_instance


def save_settings(new_settings: TrackerSettings):
    """Persist settings and make them the active instance.

    If SCT_SETTINGS_PATH is set, write JSON to that file; otherwise write the
    user-level settings.toml.
    """
    global _settings_instance
    data = {"stats_path": str(new_settings.stats_path)}
    if new_settings.default_source is not None:
        data["default_source"] = new_settings.default_source.value

    env_settings_path = os.getenv("SCT_SETTINGS_PATH")
    if env_settings_path:
        p = Path(env_settings_path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, indent=2), encoding="utf-8")
    else:
        USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        USER_SETTINGS_FILE.write_text(toml.dumps(data), encoding="utf-8")
        for key, value in data.items():
            settings_loader.set(key, value)

    _settings_instance = new_settings


def create_default_settings() -> TrackerSettings:
    """Create a default settings instance, useful for resets."""
    return TrackerSettings()


def reset_settings():
    """Reset in-memory settings (do not delete on-disk settings)."""
    global _settings_instance
    _settings_instance = None
