# Dynamic Autocomplete Package
"""
Multi-source autocomplete aggregation.

Components:
  - Registry (search.registry): Statically declared autocomplete types
  - Aggregator (search.aggregator): Filters matched types, dispatches
    searches and merges the results into one ordered list
  - Types (search.types): Bundled people, tag and channel sources
"""

__version__ = "0.1.0.dev0"
