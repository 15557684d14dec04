from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable

from catalog.entry import Entry
from index.tokenize import tag_tokens

logger = logging.getLogger(__name__)

TextFn = Callable[[Entry], str]


def fold_plurals(table: Counter[str]) -> Counter[str]:
    """Merge ``"<tag>s"`` counts into ``"<tag>"`` when both are present.

    Works on a snapshot of the keys, longest first, so chains such as
    buss -> bus -> bu end up on the shortest form whatever the insertion order.
    """
    for key in sorted(table, key=lambda k: (-len(k), k)):
        if not key.endswith("s"):
            continue
        base = key[:-1]
        if base in table:
            table[base] += table.pop(key)
    return table


class TagIndex:
    def __init__(self) -> None:
        self.title_frequency: Counter[str] = Counter()
        self.description_frequency: Counter[str] = Counter()
        self.indexed: int = 0

    def _tags(self, entry: Entry, text_fn: TextFn, table: Counter[str]) -> frozenset[str]:
        try:
            text = text_fn(entry)
        except Exception:
            logger.exception("Could not read text for %s", entry.key)
            return frozenset()
        tags = frozenset(tag_tokens(text))
        # one count per entry, not per occurrence
        table.update(tags)
        return tags

    def rebuild(
        self,
        entries: Iterable[Entry],
        title_text: TextFn,
        description_text: TextFn,
    ) -> None:
        self.title_frequency.clear()
        self.description_frequency.clear()
        self.indexed = 0

        for entry in entries:
            if entry.content is None:
                entry.title_tags = frozenset()
                entry.description_tags = frozenset()
                continue
            entry.title_tags = self._tags(entry, title_text, self.title_frequency)
            entry.description_tags = self._tags(
                entry, description_text, self.description_frequency
            )
            self.indexed += 1

        fold_plurals(self.title_frequency)
        fold_plurals(self.description_frequency)

    def stats(self) -> dict:
        return {
            "indexed": self.indexed,
            "title_tags": len(self.title_frequency),
            "description_tags": len(self.description_frequency),
        }
