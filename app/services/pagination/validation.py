from __future__ import annotations

import math
import re
from typing import Any, Iterable, TypeVar

from app.core.config import settings
from app.core.errors import InvalidArgument
from app.services.pagination.types import PageRequest

T = TypeVar("T")

IDENTIFIER_RE = re.compile(r"^[a-zA-Z0-9_]+$")
_INT_RE = re.compile(r"^\s*[+-]?\d+")

_TRUE_VALUES = {"1", "true"}
_FALSE_VALUES = {"0", "false"}


def is_valid_identifier(value: Any) -> bool:
    return isinstance(value, str) and IDENTIFIER_RE.fullmatch(value) is not None


def ensure_identifier(value: Any, kind: str) -> str:
    if not is_valid_identifier(value):
        raise InvalidArgument(f"Invalid {kind} name '{value}'")
    return value


def parse_int_safe(
    value: Any,
    default: int = 0,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Coerce ``value`` to an int, falling back to ``default`` and clamping to the range.

    Strings are parsed by their leading integer part ("12abc" -> 12), floats are
    truncated. Never raises: pagination input is repaired, not rejected.
    """
    if isinstance(value, bool) or value is None:
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        parsed = int(value) if math.isfinite(value) else None
    else:
        match = _INT_RE.match(str(value))
        parsed = int(match.group(0)) if match else None

    if parsed is None:
        return default
    if min_value is not None and parsed < min_value:
        parsed = min_value
    if max_value is not None and parsed > max_value:
        parsed = max_value
    return parsed


def validate_pagination(page: Any = None, page_size: Any = None) -> PageRequest:
    return PageRequest(
        page=parse_int_safe(page, 1, 1, settings.MAX_PAGE),
        page_size=parse_int_safe(page_size, settings.DEFAULT_PAGE_SIZE, 1, settings.MAX_PAGE_SIZE),
    )


def normalize_record_status(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
    raise InvalidArgument(f"Invalid recordStatus value '{value}'")


def validate_enum(value: Any, allowed: Iterable[T], default: T | None = None) -> T | None:
    allowed_values = list(allowed)
    return value if value in allowed_values else default


def sanitize_string(value: Any, max_length: int = 1000) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().replace("<", "").replace(">", "")[:max_length]
