"""Simple span helper for recording call timings."""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from .logger import log_event


@contextmanager
def span(kind: str, subject: Any, **fields: Any) -> Iterator[Dict[str, Any]]:
    """Time the wrapped block and log it; callers may add fields to the yielded dict."""

    start = time.perf_counter()
    extra: Dict[str, Any] = dict(fields)
    outcome = "ok"
    try:
        yield extra
    except Exception:
        outcome = "error"
        raise
    finally:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        extra.setdefault("outcome", outcome)
        log_event(kind, subject, ms=elapsed_ms, **extra)


__all__ = ["span"]
