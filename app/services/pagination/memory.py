from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

from app.schemas.pagination import PaginatedResult, build_page_meta
from app.services.pagination.base import normalize_page, resolve_sort, validate_filters, validate_search
from app.services.pagination.predicates import FilterPredicate, matches_filters, matches_search
from app.services.pagination.types import ListQuery, SearchSpec, SortSpec
from app.services.pagination.validation import ensure_identifier, validate_pagination
from app.services.document_store import DocumentStore


def paginate(items: Sequence[Any] | None, page: Any = 1, page_size: Any = 10) -> PaginatedResult:
    rows = list(items) if isinstance(items, (list, tuple)) else []
    paging = validate_pagination(page, page_size)
    start = paging.offset
    return PaginatedResult(
        data=rows[start : start + paging.page_size],
        meta=build_page_meta(len(rows), paging.page, paging.page_size),
    )


def filter_items(items: Iterable[Mapping[str, Any]], predicates: Sequence[FilterPredicate]) -> list[Mapping[str, Any]]:
    if not predicates:
        return list(items)
    return [item for item in items if matches_filters(item, predicates)]


def search_items(items: Iterable[Mapping[str, Any]], search: SearchSpec | None) -> list[Mapping[str, Any]]:
    if search is None:
        return list(items)
    return [item for item in items if matches_search(item, search.q, search.columns)]


def _sort_key(value: Any) -> tuple:
    # None sorts first; mixed types fall back to their string form.
    if value is None:
        return (0, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (1, value)
    return (2, str(value).lower())


def sort_items(items: list[Mapping[str, Any]], sort: SortSpec | None) -> list[Mapping[str, Any]]:
    if sort is None:
        return items
    return sorted(items, key=lambda item: _sort_key(item.get(sort.column)), reverse=sort.direction == "DESC")


def _matches_record_status(item: Mapping[str, Any], record_status: bool | None) -> bool:
    if record_status is None:
        return True
    value = item.get("recordStatus", True)
    if isinstance(value, str):
        value = value.strip().lower() in {"1", "true"}
    return bool(value) is record_status


def _paginate_rows(load_rows: Callable[[], Iterable[Mapping[str, Any]]], query: ListQuery) -> PaginatedResult:
    predicates = validate_filters(query.filters, query.allowed_filters)
    search = validate_search(query.search)
    sort = resolve_sort(query.sort, query.allowed_sort_columns)
    page = normalize_page(query.page)
    rows = load_rows()

    selected = [row for row in rows if _matches_record_status(row, query.record_status)]
    selected = search_items(filter_items(selected, predicates), search)
    selected = sort_items(selected, sort)

    return paginate([dict(row) for row in selected], page.page, page.page_size)


class InMemoryPaginator:
    """Pages over a sequence held by the caller; ``query.source`` is informational."""

    def __init__(self, items: Sequence[Mapping[str, Any]]):
        self.items = items

    def paginate(self, query: ListQuery) -> PaginatedResult:
        return _paginate_rows(lambda: self.items, query)


class DocumentStorePaginator:
    def __init__(self, store: DocumentStore):
        self.store = store

    def paginate(self, query: ListQuery) -> PaginatedResult:
        collection = ensure_identifier(query.source, "collection")
        return _paginate_rows(lambda: self.store.list(collection), query)
