"""
Aggregator - Dispatches a query to every matched type and merges results.

Callers report which type aliases the typed text matched and the query
substring via set_search_params(). get_results() searches each matched
type in order and concatenates the option lists. The merged tuple is
cached until the next state change, so repeated reads (one per render)
never repeat a search.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from loguru import logger

from dynamic_autocomplete.errors import TypeSearchError
from .registry import TypeRegistry


@dataclass(frozen=True)
class SearchState:
    """Matched aliases and query, always assigned together."""
    matched_type_aliases: tuple[str, ...] = ()
    query: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.matched_type_aliases)

    @property
    def cache_key(self) -> tuple[tuple[str, ...], str]:
        return self.matched_type_aliases, self.query


class Aggregator:
    """Resolves matched types against a registry and merges their results."""

    def __init__(self, registry: TypeRegistry):
        self.registry = registry
        self._state = SearchState()
        self._cache_key: Optional[tuple[tuple[str, ...], str]] = None
        self._cached: Optional[tuple[Any, ...]] = None

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def matched_types(self) -> list[str]:
        return list(self._state.matched_type_aliases)

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def autocomplete_types(self) -> dict[str, str]:
        """Alias to label listing of every registered type."""
        return self.registry.labels()

    def set_search_params(self, matched_types: Iterable[str], query: str) -> None:
        """
        Set the matched type aliases and query for the next search.

        Aliases that are not registered are dropped; order and repeats of
        the rest are kept. With no valid alias left the query is cleared.

        Args:
            matched_types: Aliases reported by trigger detection
            query: The text to search for
        """
        requested = list(matched_types)
        valid = tuple(alias for alias in requested if alias in self.registry)

        if len(valid) != len(requested):
            dropped = [alias for alias in requested if alias not in self.registry]
            logger.debug(f"Ignoring unknown autocomplete types: {dropped}")

        self._state = SearchState(
            matched_type_aliases=valid,
            query=query if valid else "",
        )

        if self._state.cache_key != self._cache_key:
            self.invalidate()

    def get_results(self) -> tuple[Any, ...]:
        """
        Get the merged options for the current matched types and query.

        Returns:
            Each matched type's results concatenated in alias order. The
            same tuple is returned until the search state changes.

        Raises:
            TypeSearchError: If any type's search fails. Nothing is cached.
        """
        key = self._state.cache_key
        if self._cached is not None and self._cache_key == key:
            return self._cached

        results = tuple(self._search_all()) if self._state.is_active else ()

        self._cache_key = key
        self._cached = results
        return results

    def invalidate(self) -> None:
        """Drop the cached results so the next read searches again."""
        self._cache_key = None
        self._cached = None

    def _search_all(self) -> list[Any]:
        query = self._state.query
        results: list[Any] = []

        for alias in self._state.matched_type_aliases:
            autocomplete_type = self.registry.get(alias)
            try:
                options = autocomplete_type.search(query)
            except Exception as exc:
                logger.exception(f"Autocomplete search failed for '{alias}'")
                raise TypeSearchError(alias, query) from exc
            # One level only: each type contributes its options as-is
            results.extend(options)

        logger.debug(
            f"Aggregated {len(results)} results for {list(self._state.matched_type_aliases)} "
            f"(query={query!r})"
        )
        return results
