from __future__ import annotations  # Re-export summarization public API

from .errors import STATUS_BY_CODE, SummaryError
from .gateway import (
    GatewayResult,
    LiveResult,
    PlaceholderResult,
    SummaryGateway,
    format_summary,
    placeholder_result,
    validate_request,
)
from .schemas import (
    AnswerRecord,
    ErrorDetail,
    ErrorEnvelope,
    SummaryDraft,
    SummaryRequest,
    SummaryResponse,
)

__all__ = [
    "STATUS_BY_CODE",
    "AnswerRecord",
    "ErrorDetail",
    "ErrorEnvelope",
    "GatewayResult",
    "LiveResult",
    "PlaceholderResult",
    "SummaryDraft",
    "SummaryError",
    "SummaryGateway",
    "SummaryRequest",
    "SummaryResponse",
    "format_summary",
    "placeholder_result",
    "validate_request",
]
