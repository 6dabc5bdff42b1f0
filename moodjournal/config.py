"""Configuration loading for MoodJournal."""

from pathlib import Path
from typing import Any, Optional

import toml

from moodjournal.errors import ConfigError

CONFIG_DIR = Path.home() / ".config" / "moodjournal"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "moodjournal.db"

SECTIONS = ("storage", "export")


def load_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the config file. Defaults to
            ~/.config/moodjournal/config.toml.

    Returns:
        Config dictionary; empty if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not valid TOML, or a known
            section is not a table.
    """
    config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()

    if not config_path.exists():
        return {}

    try:
        config = toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e

    for name in SECTIONS:
        _section(config, name)
    return config


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the ``[name]`` table, or an empty one if it is absent."""
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"Config entry '{name}' must be a table, got {section!r}")
    return section


def get_db_path(config: dict[str, Any]) -> Path:
    """Database location from ``[storage] db_path``, or the default."""
    db_path = _section(config, "storage").get("db_path")
    return Path(db_path).expanduser() if db_path else DEFAULT_DB_PATH


def get_export_dir(config: dict[str, Any]) -> Path:
    """Export directory from ``[export] directory``, or the working directory."""
    directory = _section(config, "export").get("directory")
    return Path(directory).expanduser() if directory else Path.cwd()
