from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from app.core.errors import InvalidArgument
from app.schemas.pagination import PaginatedResult, build_page_meta
from app.services.pagination.predicates import FilterPredicate, classify_filter
from app.services.pagination.types import ListQuery, PageRequest, SearchSpec, SortSpec
from app.services.pagination.validation import is_valid_identifier, validate_pagination


class Paginator(Protocol):
    def paginate(self, query: ListQuery) -> PaginatedResult:
        ...


def validate_filters(filters: Mapping[str, Any] | None, allowed: Sequence[str]) -> list[FilterPredicate]:
    predicates: list[FilterPredicate] = []
    for column, value in (filters or {}).items():
        if column not in allowed:
            raise InvalidArgument(f"Filter column '{column}' is not allowed")
        if not is_valid_identifier(column):
            raise InvalidArgument(f"Invalid filter column name '{column}'")
        predicates.append(classify_filter(column, value))
    return predicates


def validate_search(search: SearchSpec | None) -> SearchSpec | None:
    """Drops empty searches; keeps only identifier-safe columns, rejecting when none remain."""
    if search is None or not str(search.q or "").strip() or not search.columns:
        return None
    columns = tuple(c for c in search.columns if is_valid_identifier(c))
    if not columns:
        raise InvalidArgument("No valid search columns provided")
    return SearchSpec(q=search.q, columns=columns)


def resolve_sort(sort: SortSpec | None, allowed: Sequence[str]) -> SortSpec | None:
    if sort is None or not sort.column:
        return None
    if sort.column not in allowed or not is_valid_identifier(sort.column):
        raise InvalidArgument(f"Sort column '{sort.column}' is not allowed")
    direction = "ASC" if str(sort.direction).upper() == "ASC" else "DESC"
    return SortSpec(column=sort.column, direction=direction)


def assemble_result(rows: Sequence[Any], total: int, page: PageRequest) -> PaginatedResult:
    return PaginatedResult(data=list(rows), meta=build_page_meta(total, page.page, page.page_size))


def normalize_page(page: PageRequest | None) -> PageRequest:
    """Clamps a caller-built page request into the configured bounds."""
    if page is None:
        return validate_pagination()
    return validate_pagination(page.page, page.page_size)
