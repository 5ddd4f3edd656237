"""
Tags Type - Tag lookup for "#" triggers.

Reads tag definitions from data/tags.toml:

    [tags.python]
    description = "Python programming language"
    icon = "text-x-python"

Tags whose name starts with the query come first, then tags containing
the query in their name or description.
"""

from pathlib import Path
from typing import Optional

from dynamic_autocomplete.search.registry import AutocompleteType, ResultItem
from dynamic_autocomplete.utils.helpers import DATA_DIR, load_toml_table

TAG_FIELDS = {"description": str, "icon": str}


class TagsType(AutocompleteType):
    """Search tags by name and description."""

    alias = "tags"
    label = "Tags"

    def __init__(self, tags_path: Optional[Path] = None, max_results: int = 10):
        self.tags_path = Path(tags_path) if tags_path else DATA_DIR / "tags.toml"
        self.max_results = max_results
        self.tags = load_toml_table(self.tags_path, "tags", TAG_FIELDS)

    @classmethod
    def from_settings(cls, settings: dict) -> "TagsType":
        return cls(
            tags_path=Path(settings["data"]["directory"]) / "tags.toml",
            max_results=settings["search"]["max_results"],
        )

    def search(self, query: str) -> list[ResultItem]:
        q = query.strip().lstrip("#").lower()

        prefixed = []
        contained = []
        for name, tag in sorted(self.tags.items()):
            lowered = name.lower()
            if lowered.startswith(q):
                prefixed.append((name, tag))
            elif q in lowered or q in tag.get("description", "").lower():
                contained.append((name, tag))

        return [
            self._tag_to_result(name, tag)
            for name, tag in (prefixed + contained)[:self.max_results]
        ]

    def reload(self) -> None:
        self.tags = load_toml_table(self.tags_path, "tags", TAG_FIELDS)

    def _tag_to_result(self, name: str, tag: dict) -> ResultItem:
        return ResultItem(
            title=f"#{name}",
            description=tag.get("description", ""),
            icon=tag.get("icon", "tag"),
            result_type=self.alias,
            value=f"#{name}",
            data={"name": name, **tag},
        )
