"""
Autocomplete types - Bundled searchable sources.

TYPES is the static declaration of every type the registry can hold,
in listing order.
"""

from .channels import ChannelsType
from .mentions import MentionsType
from .tags import TagsType

TYPES = (MentionsType, TagsType, ChannelsType)

__all__ = [
    "TYPES",
    "ChannelsType",
    "MentionsType",
    "TagsType",
]
