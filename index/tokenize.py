from __future__ import annotations

import re

# Same split the tag lists use: any run of non-word characters.
_SEPARATOR = re.compile(r"\W+")


def tokenize(text: str | None) -> list[str]:
    """Lowercase, trim and split ``text`` on non-word runs.

    Short and underscored tokens are kept; query matching relies on that.
    """
    if not text:
        return []
    return [t for t in _SEPARATOR.split(text.lower().strip()) if t]


def tag_tokens(text: str | None) -> list[str]:
    """Tokens eligible for a tag set: longer than one char, no underscore."""
    return [t for t in tokenize(text) if len(t) > 1 and "_" not in t]


def normalize_author(name: str | None) -> str | None:
    if name is None:
        return None
    name = name.lower().strip()
    if not name:
        return None
    return _SEPARATOR.sub("_", name)
