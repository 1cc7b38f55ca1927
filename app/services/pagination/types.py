from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

SortDir = Literal["ASC", "DESC"]


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class SearchSpec:
    q: str
    columns: tuple[str, ...]


@dataclass(frozen=True)
class SortSpec:
    column: str
    direction: SortDir = "DESC"


@dataclass
class ListQuery:
    """Everything a paginator needs for one list call; built fresh per request."""

    source: str
    page: PageRequest = field(default_factory=PageRequest)
    record_status: bool | None = None
    columns: str = "*"
    filters: dict[str, Any] = field(default_factory=dict)
    allowed_filters: tuple[str, ...] = ()
    search: SearchSpec | None = None
    sort: SortSpec | None = None
    allowed_sort_columns: tuple[str, ...] = ()
    order_by: str = "updatedAt DESC"
