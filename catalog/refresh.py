from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from catalog.entry import Entry, asset_key, default_description, default_title, steam_id_from_name
from index.tags import TagIndex
from index.tokenize import normalize_author
from search.engine import Match, QueryEngine, ScoringConfig

logger = logging.getLogger(__name__)


class Catalog:
    """Known assets plus the tag index built over the ones with content.

    Entries are only ever added: an asset discovered from package metadata
    keeps its key, steam id and author while its content is unloaded.
    """

    def __init__(
        self,
        title_text: Callable[[Entry], str] = default_title,
        description_text: Callable[[Entry], str] = default_description,
        config: ScoringConfig | None = None,
    ) -> None:
        self.title_text = title_text
        self.description_text = description_text
        self.entries: dict[str, Entry] = {}
        self.index = TagIndex()
        self.engine = QueryEngine(self.index, config)

    def discover(self, key: str, *, steam_id: int = 0, author_name: str | None = None) -> Entry:
        entry = self.entries.get(key)
        if entry is None:
            entry = Entry(key=key, steam_id=steam_id, author=normalize_author(author_name))
            self.entries[key] = entry
        return entry

    def register_author(self, key: str, display_name: str | None) -> Entry:
        entry = self.discover(key)
        entry.author = normalize_author(display_name)
        if entry.author is None:
            logger.debug("No author for %s", key)
        return entry

    def refresh(self, contents: Mapping[str, Any]) -> None:
        for entry in self.entries.values():
            entry.content = None

        for name, content in contents.items():
            if content is None:
                continue
            key = asset_key(name)
            entry = self.entries.get(key)
            if entry is None:
                entry = Entry(key=key, steam_id=steam_id_from_name(name))
                self.entries[key] = entry
            entry.content = content

        self.index.rebuild(self.entries.values(), self.title_text, self.description_text)
        logger.info(
            "Catalog refreshed: %d indexed of %d known, %d title tags, %d description tags",
            self.index.indexed,
            len(self.entries),
            len(self.index.title_frequency),
            len(self.index.description_frequency),
        )

    def rank(self, query: str | None) -> list[Match]:
        return self.engine.rank(self.entries.values(), query)

    def find(self, query: str | None) -> list[Entry]:
        return self.engine.find(self.entries.values(), query)

    def stats(self) -> dict:
        return {"total": len(self.entries), **self.index.stats()}
