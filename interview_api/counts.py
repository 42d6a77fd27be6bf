from __future__ import annotations  # Aggregate count reads that tolerate empty results

import json
import logging
import re
from typing import Any, Optional

from .dispatcher import ApiClient, RequestError
from .query import SearchParams, eq


logger = logging.getLogger(__name__)  # Module logger setup

NO_ROWS_STATUS = 404
NO_ROWS_CODES = frozenset({"PGRST116", "PGRST302"})
_NO_ROWS_PATTERN = re.compile(r"status\s+404")


def fetch_count(api: ApiClient, path: str, search: SearchParams) -> int:
    """Return the row count for ``path`` under ``search``; a "no rows" failure counts as zero."""

    try:
        rows = api.request(path, search={**search, "select": "count"})
    except Exception as exc:  # noqa: BLE001
        if _is_no_rows(exc):
            return 0
        raise
    return _first_count(rows)


def count_questions_for_interview(api: ApiClient, interview_id: int) -> int:
    return fetch_count(api, "/question", {"interview_id": eq(interview_id)})


def count_applicants_for_interview(api: ApiClient, interview_id: int) -> int:
    return fetch_count(api, "/applicant", {"interview_id": eq(interview_id)})


def _first_count(rows: Any) -> int:  # Extract the count column from the first row
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
        return 0
    value = rows[0].get("count")
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return 0
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return 0
    return 0


def _is_no_rows(exc: Exception) -> bool:  # Recognise the backend's empty-result failure
    if isinstance(exc, RequestError):
        if exc.status_code != NO_ROWS_STATUS:
            return False
        code = _error_code(exc.snippet)
        if code in NO_ROWS_CODES:
            logger.debug("Count read returned no rows (code=%s)", code)
        else:
            logger.warning("Count read failed with bare 404 (code=%s); treating as zero rows", code)
        return True
    if _NO_ROWS_PATTERN.search(str(exc)):
        logger.warning("Count read failure matched on message text only: %s", exc)
        return True
    return False


def _error_code(snippet: str) -> Optional[str]:  # PostgREST error code from a JSON error body
    try:
        data = json.loads(snippet)
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("code"), str):
        return data["code"]
    return None


__all__ = [
    "count_applicants_for_interview",
    "count_questions_for_interview",
    "fetch_count",
]
