"""Pydantic schemas for the applicant summarization endpoint."""
from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr

ErrorCode = Literal[
    "VALIDATION_ERROR",
    "UNAUTHENTICATED",
    "FORBIDDEN",
    "RATE_LIMITED",
    "GENAI_UPSTREAM",
    "SERVICE_UNAVAILABLE",
]


class AnswerRecord(BaseModel):
    questionId: StrictInt = Field(gt=0)
    questionText: StrictStr = Field(min_length=1)
    answer: Optional[StrictStr] = None
    transcript: Optional[StrictStr] = None
    durationSeconds: Optional[StrictInt] = Field(default=None, ge=0)

    @property
    def response_text(self) -> str:
        """Written answer if present, otherwise the transcript; empty when neither was recorded."""
        for text in (self.answer, self.transcript):
            if text and text.strip():
                return text.strip()
        return ""


class SummaryRequest(BaseModel):
    username: StrictStr = Field(min_length=1)
    applicantId: StrictInt = Field(gt=0)
    interviewId: StrictInt = Field(gt=0)
    applicantName: StrictStr = Field(min_length=1)
    jobRole: StrictStr = Field(min_length=1)
    answers: List[AnswerRecord]
    skillsSummary: Optional[StrictStr] = None


class SummaryDraft(BaseModel):
    """Assessment fields produced by the generation provider."""

    overview: str
    strengths: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    recommendation: str


class SummaryResponse(BaseModel):
    applicantId: int
    interviewId: int
    generatedAt: str
    overview: str = Field(min_length=1)
    strengths: List[str] = Field(min_length=1)
    risks: List[str] = Field(default_factory=list)
    recommendation: str = Field(min_length=1)
    isPlaceholder: bool


class ErrorDetail(BaseModel):
    path: List[Union[str, int]]
    message: str


class ErrorEnvelope(BaseModel):
    code: ErrorCode
    message: str
    details: Optional[List[ErrorDetail]] = None


class SummaryBody(BaseModel):
    summary: SummaryResponse


class ErrorBody(BaseModel):
    error: ErrorEnvelope
