"""
Exceptions raised by the autocomplete core.

Configuration errors (duplicate aliases) surface when the registry is
built. Search failures surface from Aggregator.get_results().
"""


class AutocompleteError(Exception):
    """Base class for all autocomplete errors."""


class DuplicateAliasError(AutocompleteError):
    """Two registered types declare the same alias."""

    def __init__(self, alias: str, first: str, second: str):
        self.alias = alias
        super().__init__(
            f"Alias '{alias}' is declared by both {first} and {second}"
        )


class UnknownTypeError(AutocompleteError, KeyError):
    """Lookup of an alias that is not registered."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"No autocomplete type registered for alias '{alias}'")

    def __str__(self) -> str:
        return self.args[0]


class TypeSearchError(AutocompleteError):
    """A type's search failed during aggregation."""

    def __init__(self, alias: str, query: str):
        self.alias = alias
        self.query = query
        super().__init__(f"Search failed for type '{alias}' (query={query!r})")
