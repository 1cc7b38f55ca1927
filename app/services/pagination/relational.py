"""Relational paginator: one COUNT and one SELECT over an allow-listed table.

Both statements are assembled from the same WHERE string and the same bound
parameter map, so ``meta.total`` always describes what the SELECT pages over.
Values never reach the SQL text; identifiers are checked against
``IDENTIFIER_RE`` and quoted with the dialect's preparer.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.errors import InvalidArgument
from app.schemas.pagination import PaginatedResult
from app.services.pagination.base import (
    assemble_result,
    normalize_page,
    resolve_sort,
    validate_filters,
    validate_search,
)
from app.services.pagination.types import ListQuery, PageRequest
from app.services.pagination.validation import ensure_identifier, is_valid_identifier, parse_int_safe

_LOG = logging.getLogger("app.pagination")

SEARCH_PLACEHOLDER = "q_search"
_ORDER_TERM_RE = re.compile(r"^([a-zA-Z0-9_]+)(?:\s+(ASC|DESC))?$", re.IGNORECASE)

Quote = Callable[[str], str]


def _no_quote(name: str) -> str:
    return name


@dataclass(frozen=True)
class SqlStatements:
    where: str
    order_by: str
    params: dict[str, Any]
    count_sql: str
    data_sql: str
    page: PageRequest = field(default_factory=PageRequest)

    @property
    def data_params(self) -> dict[str, Any]:
        return {**self.params, "limit": self.page.page_size, "offset": self.page.offset}


def _select_list(columns: str, quote: Quote) -> str:
    if columns.strip() == "*":
        return "*"
    names = [c.strip() for c in columns.split(",")]
    for name in names:
        if not is_valid_identifier(name):
            raise InvalidArgument(f"Invalid column name '{name}'")
    return ", ".join(quote(name) for name in names)


def _fallback_order(order_by: str, quote: Quote) -> str:
    terms = []
    for raw in order_by.split(","):
        match = _ORDER_TERM_RE.fullmatch(raw.strip())
        if not match:
            raise InvalidArgument(f"Invalid orderBy value '{order_by}'")
        column, direction = match.group(1), (match.group(2) or "ASC").upper()
        terms.append(f"{quote(column)} {direction}")
    return ", ".join(terms)


def build_sql_statements(query: ListQuery, quote: Quote = _no_quote) -> SqlStatements:
    """Validates ``query`` and renders the COUNT/SELECT pair without touching a database."""
    table = quote(ensure_identifier(query.source, "table"))
    select_list = _select_list(query.columns, quote)
    predicates = validate_filters(query.filters, query.allowed_filters)
    search = validate_search(query.search)
    sort = resolve_sort(query.sort, query.allowed_sort_columns)
    page = normalize_page(query.page)

    clauses: list[str] = []
    params: dict[str, Any] = {}

    if query.record_status is not None:
        clauses.append(f"{quote('recordStatus')} = :recordStatus")
        params["recordStatus"] = query.record_status

    # String comparisons are case-insensitive on every backend.
    for predicate in predicates:
        placeholder = f"f_{predicate.column}"
        if predicate.wildcard:
            params[placeholder] = predicate.like_pattern.lower()
            clauses.append(f"LOWER({quote(predicate.column)}) LIKE :{placeholder}")
        elif isinstance(predicate.value, str):
            params[placeholder] = predicate.value.lower()
            clauses.append(f"LOWER({quote(predicate.column)}) = :{placeholder}")
        else:
            params[placeholder] = predicate.value
            clauses.append(f"{quote(predicate.column)} = :{placeholder}")

    if search is not None:
        params[SEARCH_PLACEHOLDER] = f"%{str(search.q).lower()}%"
        likes = " OR ".join(f"LOWER({quote(c)}) LIKE :{SEARCH_PLACEHOLDER}" for c in search.columns)
        clauses.append(f"({likes})")

    where = " AND ".join(clauses) or "1 = 1"
    if sort is not None:
        order_by = f"{quote(sort.column)} {sort.direction}"
    else:
        order_by = _fallback_order(query.order_by, quote)

    return SqlStatements(
        where=where,
        order_by=order_by,
        params=params,
        count_sql=f"SELECT COUNT(*) AS total FROM {table} WHERE {where}",
        data_sql=f"SELECT {select_list} FROM {table} WHERE {where} ORDER BY {order_by} LIMIT :limit OFFSET :offset",
        page=page,
    )


class RelationalPaginator:
    def __init__(self, db: Session):
        self.db = db

    def _quote(self, name: str) -> str:
        return self.db.get_bind().dialect.identifier_preparer.quote(name)

    def paginate(self, query: ListQuery) -> PaginatedResult:
        statements = build_sql_statements(query, quote=self._quote)
        _LOG.debug("sql paginate table=%s where=%s params=%s", query.source, statements.where, statements.params)

        total_raw = self.db.execute(text(statements.count_sql), statements.params).scalar()
        rows = self.db.execute(text(statements.data_sql), statements.data_params).mappings().all()

        total = parse_int_safe(total_raw, 0, 0)
        return assemble_result([dict(row) for row in rows], total, statements.page)
