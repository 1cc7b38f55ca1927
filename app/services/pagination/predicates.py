from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

WILDCARDS = ("*", "%")


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class FilterPredicate:
    column: str
    value: Any
    wildcard: bool

    @property
    def like_pattern(self) -> str:
        # Relational binding: "*" is the user-facing alias of "%".
        return _stringify(self.value).replace("*", "%")

    @property
    def term(self) -> str:
        text = _stringify(self.value)
        for char in WILDCARDS:
            text = text.replace(char, "")
        return text.lower()

    def matches(self, item_value: Any) -> bool:
        if self.wildcard:
            return self.term in _stringify(item_value).lower()
        if isinstance(self.value, str):
            return _stringify(item_value).lower() == self.value.lower()
        return item_value == self.value


def classify_filter(column: str, value: Any) -> FilterPredicate:
    wildcard = isinstance(value, str) and any(char in value for char in WILDCARDS)
    return FilterPredicate(column=column, value=value, wildcard=wildcard)


def matches_filters(item: Mapping[str, Any], predicates: Iterable[FilterPredicate]) -> bool:
    return all(p.matches(item.get(p.column)) for p in predicates)


def matches_search(item: Mapping[str, Any], q: str, columns: Iterable[str]) -> bool:
    needle = str(q).lower()
    for column in columns:
        if column not in item:
            continue
        if needle in _stringify(item[column]).lower():
            return True
    return False
