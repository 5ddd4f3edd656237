"""
Dynamic Autocomplete - Startup wiring.

Builds the type registry from the statically declared TYPES and the
loaded settings, and hands back a ready Aggregator.

Usage:
  from dynamic_autocomplete.config import create_aggregator

  aggregator = create_aggregator()
  aggregator.set_search_params(["mentions"], "al")
  options = aggregator.get_results()
"""

from typing import Any, Dict, Optional

from loguru import logger

from dynamic_autocomplete.search.aggregator import Aggregator
from dynamic_autocomplete.search.registry import TypeRegistry
from dynamic_autocomplete.search.types import TYPES
from dynamic_autocomplete.utils.helpers import load_settings


def build_registry(settings: Optional[Dict[str, Any]] = None, types=TYPES) -> TypeRegistry:
    """
    Instantiate the enabled types and register them.

    Args:
        settings: Loaded settings; read from disk when omitted
        types: Type classes to choose from, in listing order

    Returns:
        TypeRegistry holding every enabled type

    Raises:
        DuplicateAliasError: If two enabled types share an alias
    """
    if settings is None:
        settings = load_settings()

    enabled = settings["types"]["enabled"]
    if isinstance(enabled, str):
        enabled = [enabled]
    elif not isinstance(enabled, list):
        logger.warning(f"Expected types.enabled to be a list of aliases, got {enabled!r}")
        enabled = []
    declared = {type_cls.alias for type_cls in types}
    for alias in enabled:
        if alias not in declared:
            logger.warning(f"Enabled autocomplete type '{alias}' is not declared, skipping")

    registry = TypeRegistry(
        type_cls.from_settings(settings)
        for type_cls in types
        if type_cls.alias in enabled
    )
    logger.debug(f"Autocomplete registry initialized with types {registry.aliases()}")
    return registry


def create_aggregator(settings: Optional[Dict[str, Any]] = None) -> Aggregator:
    """Build the registry and wrap it in an Aggregator."""
    return Aggregator(build_registry(settings))
