"""
Search package - Type registry and result aggregation.

Matched type aliases and a query go in; one ordered list of options
comes out, built from each registered type's own search.
"""

from .aggregator import Aggregator, SearchState
from .registry import AutocompleteType, ResultItem, TypeDescriptor, TypeRegistry

__all__ = [
    "Aggregator",
    "AutocompleteType",
    "ResultItem",
    "SearchState",
    "TypeDescriptor",
    "TypeRegistry",
]
