from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Mapping, TypeVar

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.v1.entities import EntityConfig
from app.core.config import settings
from app.core.errors import InvalidArgument, forbidden_data_source
from app.services.document_store import get_document_store, get_fake_data
from app.services.pagination.memory import DocumentStorePaginator, InMemoryPaginator
from app.services.pagination.relational import RelationalPaginator
from app.services.pagination.types import ListQuery, SearchSpec, SortSpec
from app.services.pagination.validation import (
    normalize_record_status,
    sanitize_string,
    validate_enum,
    validate_pagination,
)
from app.services.resilience import with_retry

_LOG = logging.getLogger("app.entities")

T = TypeVar("T")

READ_SOURCES = {"sql", "nosql", "fake", "both"}
WRITE_SOURCES = {"sql", "nosql", "both"}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _serialize_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, Decimal):
        return float(value)
    return value


def row_to_document(row: Any) -> dict[str, Any]:
    """ORM row -> wire shape, keyed by column name (camelCase) like the document store."""
    mapper = sa_inspect(type(row))
    return {attr.columns[0].name: _serialize_value(getattr(row, attr.key)) for attr in mapper.column_attrs}


def _orm_values(payload: BaseModel, *, exclude: set[str]) -> dict[str, Any]:
    return payload.model_dump(exclude={"data_source", *exclude}, exclude_unset=True)


def _document_values(payload: BaseModel, *, exclude: set[str]) -> dict[str, Any]:
    return payload.model_dump(by_alias=True, mode="json", exclude={"data_source", *exclude}, exclude_unset=True)


def _ensure_source(data_source: str | None, allowed: set[str]) -> str:
    if data_source not in allowed:
        raise forbidden_data_source(data_source)
    return data_source


def _ensure_same_id(path_id: str, payload: BaseModel) -> None:
    body_id = getattr(payload, "id", None)
    if body_id is not None and str(body_id) != str(path_id):
        raise InvalidArgument(f"Body id '{body_id}' does not match path id '{path_id}'")


def _sql_call(db: Session, operation: Callable[[], T]) -> T:
    def _attempt() -> T:
        try:
            return operation()
        except SQLAlchemyError:
            db.rollback()
            raise

    return with_retry(
        _attempt,
        max_retries=settings.DB_RETRY_ATTEMPTS,
        delay_seconds=settings.DB_RETRY_DELAY_SECONDS,
    )


def build_list_query(
    config: EntityConfig,
    *,
    record_status: Any = True,
    page: Any = None,
    page_size: Any = None,
    filters: Mapping[str, Any] | None = None,
    q: Any = None,
    sort_by: Any = None,
    sort_dir: Any = None,
) -> ListQuery:
    term = sanitize_string(q)
    search = SearchSpec(q=term, columns=config.search_columns) if term else None
    sort = None
    if sort_by:
        direction = validate_enum(str(sort_dir or "").strip().upper(), ("ASC", "DESC"), "DESC")
        sort = SortSpec(column=str(sort_by), direction=direction)
    return ListQuery(
        source=config.table,
        page=validate_pagination(page, page_size),
        record_status=normalize_record_status(record_status),
        filters=dict(filters or {}),
        allowed_filters=config.allowed_filters,
        search=search,
        sort=sort,
        allowed_sort_columns=config.allowed_sorts,
        order_by=config.order_by,
    )


def _list_sql(config: EntityConfig, query: ListQuery, db: Session) -> dict[str, Any]:
    paginator = RelationalPaginator(db)
    return _sql_call(db, lambda: paginator.paginate(query)).to_envelope()


def _list_nosql(config: EntityConfig, query: ListQuery) -> dict[str, Any]:
    return DocumentStorePaginator(get_document_store()).paginate(query).to_envelope()


def list_entities_service(config: EntityConfig, data_source: str | None, query: ListQuery, db: Session) -> dict[str, Any]:
    source = _ensure_source(data_source, READ_SOURCES)
    if source == "sql":
        return _list_sql(config, query, db)
    if source == "nosql":
        return _list_nosql(config, query)
    if source == "fake":
        return InMemoryPaginator(get_fake_data(config.name)).paginate(query).to_envelope()
    return {"sql": _list_sql(config, query, db), "nosql": _list_nosql(config, query)}


def is_empty_listing(result: Mapping[str, Any]) -> bool:
    if "meta" in result:
        return int(result["meta"]["total"]) == 0
    return all(int(part["meta"]["total"]) == 0 for part in result.values())


def _get_sql(config: EntityConfig, entity_id: str, db: Session) -> dict[str, Any] | None:
    row = _sql_call(db, lambda: db.get(config.model, entity_id))
    return row_to_document(row) if row is not None else None


def get_entity_service(config: EntityConfig, data_source: str | None, entity_id: str, db: Session) -> dict[str, Any]:
    source = _ensure_source(data_source, READ_SOURCES)
    if source == "sql":
        found = _get_sql(config, entity_id, db)
    elif source == "nosql":
        found = get_document_store().find_by_id(config.name, entity_id)
    elif source == "fake":
        found = next((doc for doc in get_fake_data(config.name) if str(doc.get("id")) == entity_id), None)
    else:
        both = {
            "sql": _get_sql(config, entity_id, db),
            "nosql": get_document_store().find_by_id(config.name, entity_id),
        }
        if both["sql"] is None and both["nosql"] is None:
            raise HTTPException(status_code=404, detail=f"{config.name} '{entity_id}' not found")
        return both
    if found is None:
        raise HTTPException(status_code=404, detail=f"{config.name} '{entity_id}' not found")
    return found


def _create_sql(config: EntityConfig, payload: BaseModel, db: Session) -> None:
    if db.get(config.model, payload.id) is not None:
        raise HTTPException(status_code=409, detail=f"{config.name} '{payload.id}' already exists")
    db.add(config.model(**_orm_values(payload, exclude=set())))
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"{config.name} '{payload.id}' violates a constraint") from exc


def create_entity_service(config: EntityConfig, payload: BaseModel, db: Session) -> dict[str, Any]:
    source = _ensure_source(payload.data_source, WRITE_SOURCES)
    if source in {"sql", "both"}:
        _create_sql(config, payload, db)
    if source in {"nosql", "both"}:
        get_document_store().insert(config.name, _document_values(payload, exclude=set()))
    _LOG.info("created %s id=%s source=%s", config.name, payload.id, source)
    return {"message": "Created", "id": payload.id}


def _update_sql(config: EntityConfig, entity_id: str, values: dict[str, Any], db: Session) -> dict[str, Any] | None:
    row = db.get(config.model, entity_id)
    if row is None:
        return None
    for key, value in values.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row_to_document(row)


def update_entity_service(config: EntityConfig, entity_id: str, payload: BaseModel, db: Session) -> dict[str, Any]:
    source = _ensure_source(payload.data_source, WRITE_SOURCES)
    _ensure_same_id(entity_id, payload)
    results: dict[str, Any] = {}
    if source in {"sql", "both"}:
        results["sql"] = _update_sql(config, entity_id, _orm_values(payload, exclude={"id"}), db)
    if source in {"nosql", "both"}:
        results["nosql"] = get_document_store().update(config.name, entity_id, _document_values(payload, exclude={"id"}))
    if all(value is None for value in results.values()):
        raise HTTPException(status_code=404, detail=f"{config.name} '{entity_id}' not found")
    _LOG.info("updated %s id=%s source=%s", config.name, entity_id, source)
    data = results if source == "both" else results[source]
    return {"message": "Updated", "data": data}


def delete_entity_service(config: EntityConfig, entity_id: str, payload: BaseModel, db: Session) -> dict[str, Any]:
    source = _ensure_source(payload.data_source, WRITE_SOURCES)
    _ensure_same_id(entity_id, payload)
    deleted: list[bool] = []
    if source in {"sql", "both"}:
        values = _orm_values(payload, exclude={"id"})
        deleted.append(_update_sql(config, entity_id, values, db) is not None)
    if source in {"nosql", "both"}:
        deleted.append(get_document_store().soft_delete(config.name, entity_id, _document_values(payload, exclude={"id"})))
    if not any(deleted):
        raise HTTPException(status_code=404, detail=f"{config.name} '{entity_id}' not found")
    _LOG.info("soft-deleted %s id=%s source=%s", config.name, entity_id, source)
    return {"message": "Deleted", "id": entity_id}
