from __future__ import annotations

from dataclasses import dataclass

import pytest

from catalog.entry import Entry, asset_key, default_title, steam_id_from_name
from catalog.refresh import Catalog


@dataclass
class Prefab:
    title: str
    description: str = ""


def _catalog() -> Catalog:
    return Catalog(lambda e: e.content.title, lambda e: e.content.description)


def test_asset_key_strips_data_suffix():
    assert asset_key("123.Fire Station_Data") == "123.Fire Station"
    assert asset_key("Park") == "Park"


def test_steam_id_from_name():
    assert steam_id_from_name("123456.Fire Station") == 123456
    assert steam_id_from_name("Fire Station") == 0
    assert steam_id_from_name("abc.Fire Station") == 0


def test_default_title_splits_camel_case():
    assert default_title(Entry("123456.FireStation_Data")) == "Fire Station"
    assert default_title(Entry("PoliceStation")) == "Police Station"


def test_refresh_indexes_contents():
    catalog = _catalog()
    catalog.refresh({"A": Prefab("Fire Station"), "B": Prefab("Police Station")})
    assert catalog.entries["A"].title_tags == frozenset({"fire", "station"})
    assert catalog.index.title_frequency["station"] == 2
    assert [e.key for e in catalog.find("station")] == ["A", "B"]


def test_refresh_creates_entries_with_steam_id_and_stripped_key():
    catalog = _catalog()
    catalog.refresh({"987.Tower_Data": Prefab("Tower")})
    entry = catalog.entries["987.Tower"]
    assert entry.steam_id == 987
    assert entry.loaded


def test_known_entries_survive_missing_content():
    catalog = _catalog()
    catalog.discover("pkg.Mall", steam_id=42, author_name="Jane Doe")
    catalog.refresh({"pkg.Mall": Prefab("Shopping Mall")})
    assert [e.key for e in catalog.find("mall")] == ["pkg.Mall"]

    catalog.refresh({})
    entry = catalog.entries["pkg.Mall"]
    assert entry.content is None
    assert entry.steam_id == 42
    assert entry.author == "jane_doe"
    assert entry.title_tags == frozenset()
    assert catalog.find("mall") == []
    assert catalog.find("") == []


def test_discover_never_duplicates():
    catalog = _catalog()
    first = catalog.discover("x", steam_id=1)
    second = catalog.discover("x", steam_id=2)
    assert first is second
    assert len(catalog.entries) == 1
    assert first.steam_id == 1


def test_register_author_scores_author_token():
    catalog = _catalog()
    catalog.refresh({"A": Prefab("Fire Station"), "B": Prefab("Police Station")})
    catalog.register_author("A", "John")
    catalog.register_author("B", None)
    matches = catalog.rank("john")
    assert [m.entry.key for m in matches] == ["A"]
    assert matches[0].score == pytest.approx(1000.0)


def test_register_author_creates_unknown_entry():
    catalog = _catalog()
    entry = catalog.register_author("later", "Some One")
    assert entry.author == "some_one"
    assert entry.content is None


def test_refresh_replaces_tags_when_content_changes():
    catalog = _catalog()
    catalog.refresh({"A": Prefab("Fire Station")})
    catalog.refresh({"A": Prefab("Water Tower")})
    assert catalog.entries["A"].title_tags == frozenset({"water", "tower"})
    assert "fire" not in catalog.index.title_frequency
    assert catalog.find("fire") == []


def test_default_text_sources():
    catalog = Catalog()
    catalog.refresh({"123.FireStation_Data": object()})
    assert [e.key for e in catalog.find("fire")] == ["123.FireStation"]


def test_stats():
    catalog = _catalog()
    catalog.discover("ghost")
    catalog.refresh({"A": Prefab("Fire Station", "Puts out fires")})
    assert catalog.stats() == {
        "total": 2,
        "indexed": 1,
        "title_tags": 2,
        "description_tags": 3,
    }
