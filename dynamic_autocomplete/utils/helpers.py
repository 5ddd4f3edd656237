"""
Helper utilities for dynamic autocomplete.

Provides common functions used across the bundled types:
- Settings loading with defaults
- TOML and JSON data file loading
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

DATA_DIR = Path(__file__).parent.parent / "data"


def default_settings() -> Dict[str, Any]:
    """Built-in settings used when no settings file overrides them."""
    return {
        "search": {
            "max_results": 10,
            "fuzzy_threshold": 60,
        },
        "types": {
            "enabled": ["mentions", "tags", "channels"],
        },
        "data": {
            "directory": str(DATA_DIR),
        },
    }


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load autocomplete settings from TOML file.

    Args:
        settings_path: File to read. Defaults to data/settings.toml
            inside the package.

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "search": {
                "max_results": 10,
                "fuzzy_threshold": 60
            },
            "types": {
                "enabled": ["mentions", "tags"]
            },
            "data": {
                "directory": "/srv/autocomplete"
            }
        }
    """
    defaults = default_settings()

    if settings_path is None:
        settings_path = DATA_DIR / "settings.toml"
    settings_path = Path(settings_path)

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_toml_table(path: Path, table: str, fields: Optional[Dict[str, type]] = None) -> Dict[str, dict]:
    """
    Load one top-level table of named entries from a TOML file.

    Entries that are not tables themselves, or whose fields have the
    wrong type, are skipped with a warning.

    Args:
        path: TOML file to read
        table: Name of the top-level table (e.g. "tags")
        fields: Optional field name to expected type mapping. Fields
            absent from an entry are not checked.

    Returns:
        Mapping of entry name to its fields. Empty if the file is
        missing or cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"Data file not found at {path}")
        return {}

    try:
        data = toml.load(path)
    except Exception:
        logger.exception(f"Failed to load {table} from {path}")
        return {}

    entries = data.get(table, {})
    if not isinstance(entries, dict):
        logger.warning(f"Expected a [{table}] table in {path}")
        return {}

    for name, entry in list(entries.items()):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping malformed {table} entry '{name}'")
            del entries[name]
            continue
        for field, expected in (fields or {}).items():
            if field in entry and not isinstance(entry[field], expected):
                logger.warning(
                    f"Skipping {table} entry '{name}': '{field}' must be {expected.__name__}"
                )
                del entries[name]
                break
    return entries


def load_json_list(path: Path, key: str) -> list:
    """
    Load a list stored under a top-level key of a JSON file.

    Returns an empty list if the file doesn't exist or is invalid.
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"Data file not found at {path}")
        return []

    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.exception(f"Failed to load {key} from {path}")
        return []

    items = data.get(key, []) if isinstance(data, dict) else []
    if not isinstance(items, list):
        logger.warning(f"Expected '{key}' to be a list in {path}")
        return []
    return items
