from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from threading import Lock
from typing import Any

from fastapi import HTTPException

from app.core.config import settings
from app.services.pagination.validation import ensure_identifier

_LOG = logging.getLogger("app.document_store")

BUNDLED_FIXTURES = Path(__file__).resolve().parents[1] / "data" / "fixtures.json"


def load_fixtures(path: str | Path | None = None) -> dict[str, list[dict[str, Any]]]:
    source = Path(path) if path else BUNDLED_FIXTURES
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _LOG.warning("Fixture file %s not found; document store starts empty", source)
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Fixture file {source} must hold an object of collections")
    return {str(name): [dict(doc) for doc in docs] for name, docs in raw.items() if isinstance(docs, list)}


class DocumentStore:
    """Process-local stand-in for a document database, keyed by collection name."""

    def __init__(self, collections: dict[str, list[dict[str, Any]]] | None = None):
        self._collections: dict[str, list[dict[str, Any]]] = copy.deepcopy(collections or {})
        self._lock = Lock()

    def collections(self) -> list[str]:
        with self._lock:
            return sorted(self._collections)

    def list(self, collection: str) -> list[dict[str, Any]]:
        ensure_identifier(collection, "collection")
        with self._lock:
            return copy.deepcopy(self._collections.get(collection, []))

    def find_by_id(self, collection: str, doc_id: Any) -> dict[str, Any] | None:
        for doc in self.list(collection):
            if str(doc.get("id")) == str(doc_id):
                return doc
        return None

    def insert(self, collection: str, doc: dict[str, Any]) -> dict[str, Any]:
        ensure_identifier(collection, "collection")
        doc_id = str(doc.get("id") or "").strip()
        if not doc_id:
            raise HTTPException(status_code=400, detail="Document id is required")
        with self._lock:
            docs = self._collections.setdefault(collection, [])
            if any(str(existing.get("id")) == doc_id for existing in docs):
                raise HTTPException(status_code=409, detail=f"Document '{doc_id}' already exists in {collection}")
            stored = copy.deepcopy(doc)
            docs.append(stored)
        return copy.deepcopy(stored)

    def update(self, collection: str, doc_id: Any, changes: dict[str, Any]) -> dict[str, Any] | None:
        ensure_identifier(collection, "collection")
        with self._lock:
            for doc in self._collections.get(collection, []):
                if str(doc.get("id")) == str(doc_id):
                    doc.update({k: copy.deepcopy(v) for k, v in changes.items() if k != "id"})
                    return copy.deepcopy(doc)
        return None

    def soft_delete(self, collection: str, doc_id: Any, changes: dict[str, Any] | None = None) -> bool:
        updated = self.update(collection, doc_id, {**(changes or {}), "recordStatus": False})
        return updated is not None


_cached_store: DocumentStore | None = None
_cached_fake_data: dict[str, list[dict[str, Any]]] | None = None


def get_document_store() -> DocumentStore:
    global _cached_store
    if _cached_store is None:
        _cached_store = DocumentStore(load_fixtures(settings.FIXTURES_PATH or None))
    return _cached_store


def reset_document_store_for_tests() -> None:
    global _cached_store, _cached_fake_data
    _cached_store = None
    _cached_fake_data = None


def get_fake_data(collection: str) -> list[dict[str, Any]]:
    """Read-only fixture snapshot behind ``dataSource=fake``; store writes never reach it."""
    global _cached_fake_data
    ensure_identifier(collection, "collection")
    if _cached_fake_data is None:
        _cached_fake_data = load_fixtures(settings.FIXTURES_PATH or None)
    return copy.deepcopy(_cached_fake_data.get(collection, []))
