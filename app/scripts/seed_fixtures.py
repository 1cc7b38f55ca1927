from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from sqlalchemy import Date, DateTime
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from app.api.v1.entities import ENTITIES
from app.core.config import settings
from app.db.session import SessionLocal
from app.services.document_store import load_fixtures

_LOG = logging.getLogger("app.seed")


def _coerce(column: Any, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if isinstance(column.type, DateTime):
        return datetime.fromisoformat(value)
    if isinstance(column.type, Date):
        return date.fromisoformat(value)
    return value


def document_to_values(model: type, doc: dict[str, Any]) -> dict[str, Any]:
    """Document keys are column names; unknown keys are dropped."""
    values: dict[str, Any] = {}
    for attr in sa_inspect(model).column_attrs:
        column = attr.columns[0]
        if column.name in doc:
            values[attr.key] = _coerce(column, doc[column.name])
    return values


def upsert_documents(db: Session, model: type, docs: list[dict[str, Any]]) -> tuple[int, int]:
    created = 0
    updated = 0

    for doc in docs:
        values = document_to_values(model, doc)
        row_id = values.get("id")
        if not row_id:
            _LOG.warning("skipping %s document without id", model.__tablename__)
            continue

        row = db.get(model, row_id)
        if row is None:
            db.add(model(**values))
            created += 1
            continue

        changed = False
        for key, value in values.items():
            if getattr(row, key) != value:
                setattr(row, key, value)
                changed = True
        if changed:
            db.add(row)
            updated += 1

    db.commit()
    return created, updated


def seed_fixtures(db: Session, fixtures: dict[str, list[dict[str, Any]]]) -> dict[str, tuple[int, int]]:
    summary: dict[str, tuple[int, int]] = {}
    for entity in ENTITIES:
        docs = fixtures.get(entity.name) or []
        summary[entity.name] = upsert_documents(db, entity.model, docs)
    return summary


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    fixtures = load_fixtures(settings.FIXTURES_PATH or None)
    db = SessionLocal()
    try:
        summary = seed_fixtures(db, fixtures)
    finally:
        db.close()
    for name, (created, updated) in summary.items():
        print(f"{name} seed done: created={created}, updated={updated}")


if __name__ == "__main__":
    main()
