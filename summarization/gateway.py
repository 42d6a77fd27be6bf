from __future__ import annotations  # Applicant summarization gateway

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from config import GenerationConfig
from llm_gateway import HttpClient, LlmGatewayError, LlmRateLimitError, LlmUnavailableError, call
from observability import log_event

from .errors import SummaryError
from .prompts import build_task
from .schemas import ErrorDetail, SummaryBody, SummaryDraft, SummaryRequest, SummaryResponse


logger = logging.getLogger(__name__)  # Module logger setup

GENERIC_STRENGTH = "Completed the interview and provided responses for review."
FALLBACK_OVERVIEW = "The interview was completed but no overview could be produced."
FALLBACK_RECOMMENDATION = "Review the recorded answers before making a decision."
PLACEHOLDER_RECOMMENDATION = (
    "Review the recorded answers manually, or configure GENAI_API_KEY to enable generated summaries."
)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class LiveResult:  # Provider-generated assessment
    draft: SummaryDraft


@dataclass(frozen=True)
class PlaceholderResult:  # Deterministic assessment used without a generation key
    overview: str
    recommendation: str
    strengths: List[str] = field(default_factory=list)
    risks: List[str] = field(default_factory=list)


GenerationResult = Union[LiveResult, PlaceholderResult]


@dataclass(frozen=True)
class GatewayResult:  # HTTP status plus JSON body handed to the transport layer
    status_code: int
    body: Dict[str, Any]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso(moment: datetime, timespec: str) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec=timespec).replace("+00:00", "Z")


def validate_request(payload: Any) -> SummaryRequest:
    """Validate ``payload``, reporting every violation as a field-level detail."""

    try:
        return SummaryRequest.model_validate(payload)
    except ValidationError as exc:
        details = [
            ErrorDetail(path=list(error["loc"]), message=error["msg"])
            for error in exc.errors()
        ]
        raise SummaryError("VALIDATION_ERROR", "The summary request is invalid.", details) from exc


def placeholder_result(request: SummaryRequest) -> PlaceholderResult:  # Fixed-template assessment
    answered = sum(1 for record in request.answers if record.response_text)
    total = len(request.answers)
    overview = (
        f"No live summary could be produced for {request.applicantName} ({request.jobRole}) "
        f"because GENAI_API_KEY is not configured. "
        f"{answered} of {total} questions have a recorded response."
    )
    skills = (request.skillsSummary or "").strip()
    strengths = [f"Self-reported skills: {skills}"] if skills else []
    risks = [
        f"No response recorded for: {record.questionText.strip()}"
        for record in request.answers
        if not record.response_text
    ]
    return PlaceholderResult(
        overview=overview,
        recommendation=PLACEHOLDER_RECOMMENDATION,
        strengths=strengths,
        risks=risks,
    )


def format_summary(request: SummaryRequest, result: GenerationResult, generated_at: str) -> SummaryResponse:
    """Shape either generation branch into the canonical response."""

    if isinstance(result, LiveResult):
        draft = result.draft
        overview, recommendation = draft.overview, draft.recommendation
        strengths, risks = draft.strengths, draft.risks
        is_placeholder = False
    else:
        overview, recommendation = result.overview, result.recommendation
        strengths, risks = result.strengths, result.risks
        is_placeholder = True

    return SummaryResponse(
        applicantId=request.applicantId,
        interviewId=request.interviewId,
        generatedAt=generated_at,
        overview=overview.strip() or FALLBACK_OVERVIEW,
        strengths=_clean(strengths) or [GENERIC_STRENGTH],
        risks=_clean(risks),
        recommendation=recommendation.strip() or FALLBACK_RECOMMENDATION,
        isPlaceholder=is_placeholder,
    )


def _clean(items: List[str]) -> List[str]:
    return [item.strip() for item in items if isinstance(item, str) and item.strip()]


class SummaryGateway:  # Validates, generates and formats applicant summaries
    def __init__(
        self,
        generation: GenerationConfig,
        *,
        client: Optional[HttpClient] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._generation = generation
        self._client = client
        self._clock = clock or _utc_now

    def summarize(self, payload: Any, identity: Optional[str]) -> GatewayResult:
        """Run the full request cycle and return the envelope to send."""

        try:
            summary = self.run(payload, identity)
        except SummaryError as exc:
            log_event("summary.error", _subject(payload), level=logging.WARNING, code=exc.code, status=exc.status_code)
            return GatewayResult(status_code=exc.status_code, body=exc.body())
        log_event(
            "summary.done",
            summary.applicantId,
            status=200,
            branch="placeholder" if summary.isPlaceholder else "live",
        )
        return GatewayResult(status_code=200, body=SummaryBody(summary=summary).model_dump())

    def run(self, payload: Any, identity: Optional[str]) -> SummaryResponse:
        if not identity:
            raise SummaryError("UNAUTHENTICATED", "A valid bearer credential is required.")
        request = validate_request(payload)
        if request.username != identity:
            raise SummaryError("FORBIDDEN", "You can only request summaries for your own records.")
        result = self._generate(request)
        if isinstance(result, LiveResult):
            generated_at = _iso(self._clock(), "milliseconds")
        else:
            generated_at = _iso(self._clock().replace(microsecond=0), "seconds")
        return format_summary(request, result, generated_at)

    def _generate(self, request: SummaryRequest) -> GenerationResult:  # Pick the live or placeholder branch
        if not self._generation.live:
            return placeholder_result(request)
        try:
            draft = call(
                build_task(request),
                SummaryDraft,
                cfg=self._generation.route,
                api_key=self._generation.api_key,
                client=self._client,
            )
        except LlmRateLimitError as exc:
            raise SummaryError("RATE_LIMITED", "The summary service is busy. Please try again shortly.") from exc
        except LlmUnavailableError as exc:
            raise SummaryError("SERVICE_UNAVAILABLE", "The summary service is currently unavailable.") from exc
        except LlmGatewayError as exc:
            logger.exception("Summary generation failed")
            raise SummaryError("GENAI_UPSTREAM", "The summary could not be generated.") from exc
        return LiveResult(draft=draft)


def _subject(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("applicantId")
    return None


__all__ = [
    "GatewayResult",
    "GenerationResult",
    "LiveResult",
    "PlaceholderResult",
    "SummaryGateway",
    "format_summary",
    "placeholder_result",
    "validate_request",
]
