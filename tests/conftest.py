"""
Shared test fixtures for the dynamic autocomplete test suite.

Provides temporary settings, people, tags and channels files that use
real file I/O (no mocking of the filesystem), plus stub types for
exercising the registry and aggregator in isolation.
"""

import json
from unittest.mock import MagicMock

import pytest
import toml

from dynamic_autocomplete.search.registry import AutocompleteType


class StubType(AutocompleteType):
    """Minimal type returning canned results and counting searches."""

    def __init__(self, alias, label=None, results=None):
        self._alias = alias
        self._label = label or alias.title()
        self._results = results if results is not None else []
        self.search_calls = MagicMock()

    @property
    def alias(self):
        return self._alias

    @property
    def label(self):
        return self._label

    def search(self, query):
        self.search_calls(query)
        if callable(self._results):
            return self._results(query)
        return list(self._results)


@pytest.fixture
def stub_type():
    """Factory for StubType instances."""
    return StubType


@pytest.fixture
def tmp_people(tmp_path):
    """Create a real people JSON file with test entries."""
    people_path = tmp_path / "people.json"
    data = {
        "people": [
            {"username": "alice", "name": "Alice Smith", "avatar": "alice.png"},
            {"username": "bob", "name": "Bob Nguyen"},
            {"username": "carol", "name": "Carol Okafor"},
        ]
    }
    people_path.write_text(json.dumps(data, indent=2))
    return people_path


@pytest.fixture
def tmp_tags(tmp_path):
    """Create a real tags TOML file with test entries."""
    tags_path = tmp_path / "tags.toml"
    data = {
        "tags": {
            "release": {"description": "Release planning"},
            "research": {"description": "Papers and notes"},
            "bug": {"description": "Something is broken", "icon": "dialog-error"},
            "prerelease": {"description": "Early builds"},
            "docs": {"description": "Documentation rework"},
        }
    }
    tags_path.write_text(toml.dumps(data))
    return tags_path


@pytest.fixture
def tmp_channels(tmp_path):
    """Create a real channels TOML file with test entries."""
    channels_path = tmp_path / "channels.toml"
    data = {
        "channels": {
            "general": {"topic": "Announcements"},
            "random": {"topic": "Anything goes"},
            "releases": {"topic": "Release coordination"},
            "leadership": {"topic": "Leadership sync", "private": True},
        }
    }
    channels_path.write_text(toml.dumps(data))
    return channels_path


@pytest.fixture
def tmp_settings(tmp_path, tmp_people, tmp_tags, tmp_channels):
    """Create a real settings TOML file pointing at the temporary data files."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"max_results": 5, "fuzzy_threshold": 50},
        "types": {"enabled": ["mentions", "tags", "channels"]},
        "data": {"directory": str(tmp_path)},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
