from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

_DATA_SUFFIX = "_Data"
_CAMEL_WORD = re.compile(r"([A-Z][a-z]+)")


@dataclass
class Entry:
    key: str
    content: Any | None = None
    steam_id: int = 0
    author: str | None = None  # normalized author token
    title_tags: frozenset[str] = field(default_factory=frozenset)
    description_tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def loaded(self) -> bool:
        return self.content is not None


def asset_key(name: str) -> str:
    if name.endswith(_DATA_SUFFIX):
        return name[: -len(_DATA_SUFFIX)]
    return name


def steam_id_from_name(name: str) -> int:
    """Workshop assets are named ``<steam id>.<asset name>``; 0 otherwise."""
    prefix, sep, _ = name.partition(".")
    if not sep or not prefix.isdigit():
        return 0
    return int(prefix)


def default_title(entry: Entry) -> str:
    # Fallback when no localized title exists: "123.FireStation_Data" -> "Fire Station"
    name = entry.key
    if "." in name:
        name = name[name.index(".") + 1 :]
    name = asset_key(name)
    return _CAMEL_WORD.sub(r" \1", name).strip()


def default_description(entry: Entry) -> str:
    return ""
