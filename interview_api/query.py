"""Query string encoding and PostgREST value conventions."""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Union
from urllib.parse import quote

Scalar = Union[str, int, float, bool]
SearchParams = Mapping[str, Scalar]

# Same unreserved set as encodeURIComponent, so '*' and '.' in filters stay literal.
_SAFE = "-_.!~*'()"


def _stringify(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(search: Optional[SearchParams] = None) -> str:
    """Serialise search parameters into a query string, including the leading ``?``."""

    if not search:
        return ""
    pairs = [
        f"{quote(str(key), safe=_SAFE)}={quote(_stringify(value), safe=_SAFE)}"
        for key, value in search.items()
    ]
    return "?" + "&".join(pairs)


def eq(value: Scalar) -> str:
    return f"eq.{_stringify(value)}"


def ilike(text: str) -> str:
    return f"ilike.*{text}*"


def order_by(field: str, *, descending: bool = False) -> str:
    return f"{field}.{'desc' if descending else 'asc'}"


def page_window(page: int, page_size: int) -> Dict[str, int]:
    if page < 0 or page_size < 1:
        raise ValueError("page must be >= 0 and page_size >= 1")
    return {"limit": page_size, "offset": page * page_size}


def build_question_search(
    *,
    interview_id: Optional[int],
    order: str,
    page: int,
    page_size: int,
    search_text: str = "",
) -> Dict[str, Scalar]:
    """Search parameters for the paged, optionally filtered question list."""

    search: Dict[str, Scalar] = {"order": order}
    search.update(page_window(page, page_size))
    if interview_id is not None:
        search["interview_id"] = eq(interview_id)
    trimmed = search_text.strip()
    if trimmed:
        search["question"] = ilike(trimmed)
    return search


__all__ = [
    "Scalar",
    "SearchParams",
    "build_query",
    "build_question_search",
    "eq",
    "ilike",
    "order_by",
    "page_window",
]
