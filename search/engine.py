from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from catalog.entry import Entry
from index.tags import TagIndex
from index.tokenize import tokenize

logger = logging.getLogger(__name__)


@dataclass
class ScoringConfig:
    author_weight: float = 100.0
    title_weight: float = 10.0
    description_weight: float = 1.0
    prefix_bonus: float = 10.0  # multiplier when the query token starts the tag


@dataclass
class Match:
    entry: Entry
    score: float


def substring_score(
    query: str,
    tag: str,
    frequency: Mapping[str, int] | None = None,
    *,
    prefix_bonus: float = 10.0,
) -> float:
    """Score one query token against one tag.

    Earlier and longer matches score higher; with a frequency table the
    score is divided by the number of entries sharing the tag.
    """
    idx = tag.find(query)
    if idx < 0:
        return 0.0
    multiplier = prefix_bonus if idx == 0 else 1.0
    score = multiplier * ((len(tag) - idx) / len(tag)) * (len(query) / len(tag))
    if frequency is None:
        return score
    count = frequency.get(tag)
    if not count:
        logger.warning("Tag not found in frequency table: %s", tag)
        return score
    return score / count


class QueryEngine:
    def __init__(self, index: TagIndex, config: ScoringConfig | None = None) -> None:
        self.index = index
        self.config = config or ScoringConfig()

    def _token_score(self, token: str, entry: Entry) -> float:
        cfg = self.config
        score = 0.0
        if entry.author is not None:
            score += cfg.author_weight * substring_score(
                token, entry.author, prefix_bonus=cfg.prefix_bonus
            )
        for tag in entry.title_tags:
            score += cfg.title_weight * substring_score(
                token, tag, self.index.title_frequency, prefix_bonus=cfg.prefix_bonus
            )
        for tag in entry.description_tags:
            score += cfg.description_weight * substring_score(
                token, tag, self.index.description_frequency, prefix_bonus=cfg.prefix_bonus
            )
        return score

    def rank(self, entries: Iterable[Entry], query: str | None) -> list[Match]:
        loaded = [e for e in entries if e.content is not None]
        tokens = tokenize(query)
        if not tokens:
            return [Match(e, 0.0) for e in sorted(loaded, key=lambda e: e.key)]

        # scratch scores for this query only, keyed by entry key
        scores: dict[str, float] = {}
        for entry in loaded:
            total = 0.0
            for token in tokens:
                s = self._token_score(token, entry)
                if s <= 0:
                    # every query token must hit something
                    total = 0.0
                    break
                total += s
            scores[entry.key] = total

        out = [Match(e, scores[e.key]) for e in loaded if scores[e.key] > 0]
        out.sort(key=lambda m: m.score, reverse=True)
        return out

    def find(self, entries: Iterable[Entry], query: str | None) -> list[Entry]:
        return [m.entry for m in self.rank(entries, query)]
