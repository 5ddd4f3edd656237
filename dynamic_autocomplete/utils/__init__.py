# Dynamic Autocomplete Utilities Package
"""
Shared utility functions for settings and data file loading.
"""

from .helpers import DATA_DIR, load_json_list, load_settings, load_toml_table

__all__ = ["DATA_DIR", "load_json_list", "load_settings", "load_toml_table"]
