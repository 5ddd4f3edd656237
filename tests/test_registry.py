"""
Tests for the TypeRegistry and type descriptors.

Uses stub types (no data files).
"""

import pytest

from conftest import StubType
from dynamic_autocomplete.errors import DuplicateAliasError, UnknownTypeError
from dynamic_autocomplete.search.registry import ResultItem, TypeDescriptor, TypeRegistry


class TestTypeDescriptor:

    def test_descriptor_is_immutable(self):
        descriptor = TypeDescriptor(alias="mentions", label="People")
        with pytest.raises(AttributeError):
            descriptor.alias = "tags"

    def test_to_dict(self):
        descriptor = TypeDescriptor(alias="mentions", label="People")
        assert descriptor.to_dict() == {"alias": "mentions", "label": "People"}

    def test_type_describes_itself(self):
        assert StubType("tags", "Tags").describe() == TypeDescriptor("tags", "Tags")


class TestTypeRegistry:
    """Test registration and listing."""

    def _make_registry(self):
        return TypeRegistry([
            StubType("mentions", "People"),
            StubType("tags", "Tags"),
        ])

    def test_list_types_keyed_by_alias(self):
        types = self._make_registry().list_types()
        assert list(types) == ["mentions", "tags"]
        assert types["mentions"] == TypeDescriptor("mentions", "People")
        assert types["tags"].label == "Tags"

    def test_labels_listing(self):
        assert self._make_registry().labels() == {"mentions": "People", "tags": "Tags"}

    def test_listing_stable_across_calls(self):
        registry = self._make_registry()
        first = registry.list_types()
        second = registry.list_types()
        assert first == second
        assert len(first) == len(second) == 2

    def test_descriptors_recreated_on_each_read(self):
        registry = self._make_registry()
        assert registry.list_types()["tags"] is not registry.list_types()["tags"]

    def test_duplicate_alias_is_configuration_error(self):
        with pytest.raises(DuplicateAliasError) as exc_info:
            TypeRegistry([StubType("tags", "Tags"), StubType("tags", "Labels")])
        assert exc_info.value.alias == "tags"

    def test_duplicate_alias_keeps_first_registration(self):
        registry = TypeRegistry([StubType("tags", "Tags")])
        with pytest.raises(DuplicateAliasError):
            registry.register(StubType("tags", "Labels"))
        assert registry.labels() == {"tags": "Tags"}

    def test_get_unknown_alias_raises(self):
        registry = self._make_registry()
        with pytest.raises(UnknownTypeError):
            registry.get("emoji")

    def test_unknown_type_error_is_key_error(self):
        with pytest.raises(KeyError):
            self._make_registry().get("emoji")

    def test_contains_and_len(self):
        registry = self._make_registry()
        assert "mentions" in registry
        assert "emoji" not in registry
        assert len(registry) == 2
        assert list(registry) == ["mentions", "tags"]

    def test_empty_registry(self):
        registry = TypeRegistry()
        assert registry.list_types() == {}
        assert len(registry) == 0


class TestResultItem:

    def test_to_dict(self):
        item = ResultItem(title="#bug", result_type="tags", value="#bug")
        data = item.to_dict()
        assert data["title"] == "#bug"
        assert data["result_type"] == "tags"
        assert data["data"] == {}
