from __future__ import annotations  # Assemble summary bundles and post them to the summarization endpoint

from typing import Any, Dict, List, Optional, Sequence

from summarization.schemas import SummaryResponse

from .dispatcher import ApiClient
from .models import Applicant, ApplicantAnswer, Interview, Question
from .query import eq
from .resources import AdminApi, ApiPayloadError

SUMMARIZE_PATH = "/api/summarize-applicant"


def build_summary_request(
    applicant: Applicant,
    interview: Interview,
    questions: Sequence[Question],
    answers: Sequence[ApplicantAnswer],
    *,
    skills_summary: Optional[str] = None,
) -> Dict[str, Any]:
    """Bundle an applicant's answers in question order; ``username`` is merged in by the dispatcher."""

    by_question = {answer.question_id: answer for answer in answers if answer.applicant_id == applicant.id}
    records: List[Dict[str, Any]] = []
    for question in questions:
        answer = by_question.get(question.id)
        records.append(
            {
                "questionId": question.id,
                "questionText": question.question,
                "answer": answer.answer if answer else None,
                "transcript": None,
            }
        )
    payload: Dict[str, Any] = {
        "applicantId": applicant.id,
        "interviewId": interview.id,
        "applicantName": applicant.full_name,
        "jobRole": interview.job_role,
        "answers": records,
    }
    if skills_summary:
        payload["skillsSummary"] = skills_summary
    return payload


def load_summary_request(admin: AdminApi, applicant_id: int, *, skills_summary: Optional[str] = None) -> Dict[str, Any]:
    """Read the applicant, interview, questions and answers needed for a summary bundle."""

    applicants = admin.applicants.list({"id": eq(applicant_id)})
    if not applicants:
        raise LookupError(f"Applicant {applicant_id} not found")
    applicant = applicants[0]
    interviews = admin.interviews.list({"id": eq(applicant.interview_id)})
    if not interviews:
        raise LookupError(f"Interview {applicant.interview_id} not found")
    questions = admin.questions.list({"interview_id": eq(applicant.interview_id), "order": "id.asc"})
    answers = admin.applicant_answers.list({"applicant_id": eq(applicant.id)})
    return build_summary_request(applicant, interviews[0], questions, answers, skills_summary=skills_summary)


def request_summary(api: ApiClient, payload: Dict[str, Any]) -> SummaryResponse:
    """POST a bundle to the summarization endpoint; error envelopes surface as ``RequestError``."""

    result = api.request(SUMMARIZE_PATH, method="POST", body=payload)
    if not isinstance(result, dict) or "summary" not in result:
        raise ApiPayloadError(f"Unexpected summary response: {str(result)[:120]}")
    return SummaryResponse.model_validate(result["summary"])


__all__ = ["SUMMARIZE_PATH", "build_summary_request", "load_summary_request", "request_summary"]
