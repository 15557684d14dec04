from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI
from pydantic import BaseModel

from catalog.entry import Entry, asset_key, steam_id_from_name
from catalog.refresh import Catalog
from config.settings import get_settings, setup_logging

setup_logging()

app = FastAPI(title="FindIt Tag Search API", version="0.1.0")


@dataclass
class AssetContent:
    title: str
    description: str = ""


def _title(entry: Entry) -> str:
    return entry.content.title


def _description(entry: Entry) -> str:
    return entry.content.description


_CATALOG: Catalog | None = None


def get_catalog() -> Catalog:
    global _CATALOG
    if _CATALOG is None:
        _CATALOG = Catalog(_title, _description, config=get_settings().scoring())
    return _CATALOG


def reset_catalog() -> None:
    global _CATALOG
    _CATALOG = None


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


class AssetIn(BaseModel):
    name: str
    title: str
    description: str = ""
    steam_id: int = 0
    author: str | None = None


class CatalogRequest(BaseModel):
    items: list[AssetIn]


@app.post("/catalog")
def catalog_refresh(body: CatalogRequest) -> dict[str, int]:
    catalog = get_catalog()
    contents: dict[str, AssetContent] = {}
    for item in body.items:
        # metadata first, the way package scanning sees assets before they load
        entry = catalog.discover(
            asset_key(item.name), steam_id=item.steam_id or steam_id_from_name(item.name)
        )
        if item.author is not None:
            catalog.register_author(entry.key, item.author)
        contents[item.name] = AssetContent(title=item.title, description=item.description)
    catalog.refresh(contents)
    return {"indexed": catalog.index.indexed, "total": len(catalog.entries)}


class AuthorIn(BaseModel):
    key: str
    name: str | None = None


class AuthorsRequest(BaseModel):
    authors: list[AuthorIn]


@app.post("/authors")
def register_authors(body: AuthorsRequest) -> dict[str, int]:
    catalog = get_catalog()
    for a in body.authors:
        catalog.register_author(a.key, a.name)
    return {"registered": len(body.authors)}


@app.get("/find")
def find(q: str = "", limit: int | None = None) -> dict[str, Any]:
    matches = get_catalog().rank(q)
    if limit is not None:
        matches = matches[: max(limit, 0)]
    results: list[dict[str, Any]] = [
        {
            "key": m.entry.key,
            "title": m.entry.content.title,
            "steam_id": m.entry.steam_id,
            "author": m.entry.author,
            "score": float(round(m.score, 6)),
        }
        for m in matches
    ]
    return {"query": q, "count": len(results), "results": results}


@app.get("/index/stats")
def index_stats() -> dict[str, int]:
    return get_catalog().stats()
