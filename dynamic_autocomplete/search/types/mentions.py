"""
Mentions Type - People directory search for "@" mentions.

Reads people from data/people.json:
    {"people": [{"username": "alice", "name": "Alice Smith", "avatar": "..."}]}

Uses rapidfuzz weighted ratio over username and display name so that
partial or misspelled names still match.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from rapidfuzz import fuzz, process, utils

from dynamic_autocomplete.search.registry import AutocompleteType, ResultItem
from dynamic_autocomplete.utils.helpers import DATA_DIR, load_json_list


class MentionsType(AutocompleteType):
    """Search people by username or display name."""

    alias = "mentions"
    label = "People"

    def __init__(
        self,
        people_path: Optional[Path] = None,
        max_results: int = 10,
        fuzzy_threshold: int = 60,
    ):
        self.people_path = Path(people_path) if people_path else DATA_DIR / "people.json"
        self.max_results = max_results
        self.fuzzy_threshold = fuzzy_threshold
        self.people = self._load_people()

    @classmethod
    def from_settings(cls, settings: dict) -> "MentionsType":
        return cls(
            people_path=Path(settings["data"]["directory"]) / "people.json",
            max_results=settings["search"]["max_results"],
            fuzzy_threshold=settings["search"]["fuzzy_threshold"],
        )

    def search(self, query: str) -> list[ResultItem]:
        if not query or not query.strip():
            return self._people_to_results(self.people[:self.max_results])

        # username -> searchable text
        choices = {
            person["username"]: f"{person['username']} {person.get('name', '')}"
            for person in self.people
        }

        matches = process.extract(
            query.strip(),
            choices,
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            limit=self.max_results,
            score_cutoff=self.fuzzy_threshold,
        )

        # matches: list of (matched_string, score, key)
        by_username = {person["username"]: person for person in self.people}
        return self._people_to_results(
            by_username[username] for _matched, _score, username in matches
        )

    def reload(self) -> None:
        self.people = self._load_people()

    def _load_people(self) -> list[dict]:
        people = []
        for entry in load_json_list(self.people_path, "people"):
            if not isinstance(entry, dict) or not isinstance(entry.get("username"), str) or not entry["username"]:
                logger.warning(f"Skipping malformed person entry: {entry!r}")
                continue
            people.append(entry)
        return people

    def _people_to_results(self, people) -> list[ResultItem]:
        return [
            ResultItem(
                title=person.get("name") or person["username"],
                description=f"@{person['username']}",
                icon=person.get("avatar", "avatar-default"),
                result_type=self.alias,
                value=f"@{person['username']}",
                data=person,
            )
            for person in people
        ]
