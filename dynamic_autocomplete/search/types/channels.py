"""
Channels Type - Public channel lookup for "~" triggers.

Reads channels from data/channels.toml:

    [channels.general]
    topic = "Company-wide announcements"

    [channels.leadership]
    topic = "Leadership sync"
    private = true

Private channels are never offered.
"""

from pathlib import Path
from typing import Optional

from dynamic_autocomplete.search.registry import AutocompleteType, ResultItem
from dynamic_autocomplete.utils.helpers import DATA_DIR, load_toml_table

CHANNEL_FIELDS = {"topic": str, "private": bool}


class ChannelsType(AutocompleteType):
    """Search public channels by name."""

    alias = "channels"
    label = "Channels"

    def __init__(self, channels_path: Optional[Path] = None, max_results: int = 10):
        self.channels_path = Path(channels_path) if channels_path else DATA_DIR / "channels.toml"
        self.max_results = max_results
        self.channels = load_toml_table(self.channels_path, "channels", CHANNEL_FIELDS)

    @classmethod
    def from_settings(cls, settings: dict) -> "ChannelsType":
        return cls(
            channels_path=Path(settings["data"]["directory"]) / "channels.toml",
            max_results=settings["search"]["max_results"],
        )

    def search(self, query: str) -> list[ResultItem]:
        q = query.strip().lower()

        matching = [
            (name, channel)
            for name, channel in sorted(self.channels.items())
            if not channel.get("private", False) and q in name.lower()
        ]

        return [
            ResultItem(
                title=f"~{name}",
                description=channel.get("topic", ""),
                icon="chat",
                result_type=self.alias,
                value=f"~{name}",
                data={"name": name, **channel},
            )
            for name, channel in matching[:self.max_results]
        ]

    def reload(self) -> None:
        self.channels = load_toml_table(self.channels_path, "channels", CHANNEL_FIELDS)
