from __future__ import annotations  # Summarization error taxonomy

from typing import Dict, List, Optional

from .schemas import ErrorBody, ErrorCode, ErrorDetail, ErrorEnvelope

STATUS_BY_CODE: Dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "UNAUTHENTICATED": 401,
    "FORBIDDEN": 403,
    "RATE_LIMITED": 429,
    "GENAI_UPSTREAM": 500,
    "SERVICE_UNAVAILABLE": 503,
}


class SummaryError(Exception):  # Gateway failure carrying a stable code and safe message
    def __init__(self, code: ErrorCode, message: str, details: Optional[List[ErrorDetail]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return STATUS_BY_CODE[self.code]

    def envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(code=self.code, message=self.message, details=self.details)

    def body(self) -> dict:
        return ErrorBody(error=self.envelope()).model_dump(exclude_none=True)


__all__ = ["STATUS_BY_CODE", "SummaryError"]
