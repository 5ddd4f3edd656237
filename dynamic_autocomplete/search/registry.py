"""
Type Registry - Statically declared autocomplete types.

Each type exposes a unique alias (the trigger key, e.g. "mentions"),
a display label, and a search() method. The registry is built once at
startup from a fixed sequence of types and lists them by alias in
declaration order.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Iterator, Sequence

from loguru import logger

from dynamic_autocomplete.errors import DuplicateAliasError, UnknownTypeError


@dataclass
class ResultItem:
    """A single autocomplete option from any type."""
    title: str
    description: str = ""
    icon: str = ""
    result_type: str = ""  # alias of the type that produced it
    value: str = ""  # text inserted when the option is picked
    data: dict = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TypeDescriptor:
    """Immutable alias/label pair describing one registered type."""
    alias: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"alias": self.alias, "label": self.label}


class AutocompleteType(ABC):
    """Base class for all autocomplete types."""

    @property
    @abstractmethod
    def alias(self) -> str:
        """Unique identifier, also used as the trigger key."""
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def search(self, query: str) -> Sequence[Any]:
        """Return the ordered options matching the query."""
        ...

    def describe(self) -> TypeDescriptor:
        return TypeDescriptor(alias=self.alias, label=self.label)


class TypeRegistry:
    """Alias-keyed collection of autocomplete types."""

    def __init__(self, types: Iterable[AutocompleteType] = ()):
        self._types: dict[str, AutocompleteType] = {}
        for autocomplete_type in types:
            self.register(autocomplete_type)

    def register(self, autocomplete_type: AutocompleteType) -> None:
        """
        Add a type under its alias.

        Raises:
            DuplicateAliasError: If another type already uses the alias.
        """
        alias = autocomplete_type.alias
        existing = self._types.get(alias)
        if existing is not None:
            raise DuplicateAliasError(
                alias,
                type(existing).__name__,
                type(autocomplete_type).__name__,
            )
        self._types[alias] = autocomplete_type
        logger.debug(f"Registered autocomplete type '{alias}' ({type(autocomplete_type).__name__})")

    def list_types(self) -> dict[str, TypeDescriptor]:
        """
        Describe every registered type.

        Returns:
            Mapping of alias to a freshly built TypeDescriptor, in
            registration order.
        """
        return {alias: t.describe() for alias, t in self._types.items()}

    def labels(self) -> dict[str, str]:
        """Alias to label listing for the rendering layer."""
        return {alias: d.label for alias, d in self.list_types().items()}

    def get(self, alias: str) -> AutocompleteType:
        try:
            return self._types[alias]
        except KeyError:
            raise UnknownTypeError(alias) from None

    def aliases(self) -> list[str]:
        return list(self._types)

    def __contains__(self, alias: object) -> bool:
        return alias in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
