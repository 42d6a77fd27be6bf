import pytest

from conftest import API_BASE, USERNAME, FakeResponse
from interview_api.dispatcher import ApiClient, RequestError
from interview_api.models import Applicant, ApplicantAnswer, Interview, Question
from interview_api.resources import AdminApi
from interview_api.summaries import build_summary_request, load_summary_request, request_summary


APPLICANT = {
    "id": 11,
    "interview_id": 5,
    "title": "Ms",
    "firstname": "Grace",
    "surname": "Hopper",
    "email_address": "grace@example.com",
    "interview_status": "Completed",
    "username": USERNAME,
}
INTERVIEW = {"id": 5, "title": "Compilers", "job_role": "Compiler Engineer", "status": "Published", "username": USERNAME}
QUESTIONS = [
    {"id": 1, "interview_id": 5, "question": "Describe a compiler.", "difficulty": "Easy", "username": USERNAME},
    {"id": 2, "interview_id": 5, "question": "Debug hardware?", "difficulty": "Advanced", "username": USERNAME},
]
ANSWERS = [
    {"id": 30, "interview_id": 5, "question_id": 1, "applicant_id": 11, "answer": "A-0", "username": USERNAME},
]


def test_bundle_follows_question_order() -> None:
    payload = build_summary_request(
        Applicant(**APPLICANT),
        Interview(**INTERVIEW),
        [Question(**row) for row in QUESTIONS],
        [ApplicantAnswer(**row) for row in ANSWERS],
        skills_summary="COBOL",
    )
    assert payload["applicantId"] == 11
    assert payload["interviewId"] == 5
    assert payload["applicantName"] == "Ms Grace Hopper"
    assert payload["jobRole"] == "Compiler Engineer"
    assert [record["questionId"] for record in payload["answers"]] == [1, 2]
    assert payload["answers"][0]["answer"] == "A-0"
    assert payload["answers"][1]["answer"] is None
    assert payload["skillsSummary"] == "COBOL"
    assert "username" not in payload


def test_load_reads_related_records(api_cfg, backend) -> None:
    backend.queue(
        FakeResponse.json_body([APPLICANT]),
        FakeResponse.json_body([INTERVIEW]),
        FakeResponse.json_body(QUESTIONS),
        FakeResponse.json_body(ANSWERS),
    )
    admin = AdminApi(api_cfg, client=backend)

    payload = load_summary_request(admin, 11)

    assert [call["url"] for call in backend.calls] == [
        f"{API_BASE}/applicant?id=eq.11",
        f"{API_BASE}/interview?id=eq.5",
        f"{API_BASE}/question?interview_id=eq.5&order=id.asc",
        f"{API_BASE}/applicant_answer?applicant_id=eq.11",
    ]
    assert len(payload["answers"]) == 2


def test_load_missing_applicant(api_cfg, backend) -> None:
    admin = AdminApi(api_cfg, client=backend)
    with pytest.raises(LookupError):
        load_summary_request(admin, 404)


def test_request_summary_posts_with_identity(api_cfg, backend) -> None:
    summary = {
        "applicantId": 11,
        "interviewId": 5,
        "generatedAt": "2026-01-01T00:00:00Z",
        "overview": "Solid.",
        "strengths": ["Compilers"],
        "risks": [],
        "recommendation": "Hire.",
        "isPlaceholder": False,
    }
    backend.queue(FakeResponse.json_body({"summary": summary}))
    api = ApiClient(api_cfg, client=backend)

    result = request_summary(api, {"applicantId": 11})

    assert result.recommendation == "Hire."
    call = backend.calls[0]
    assert call["url"] == f"{API_BASE}/api/summarize-applicant"
    assert call["headers"]["Prefer"] == "return=representation"
    assert backend.body()["username"] == USERNAME


def test_request_summary_surfaces_error_envelope(api_cfg, backend) -> None:
    backend.queue(FakeResponse(403, '{"error":{"code":"FORBIDDEN","message":"no"}}'))
    api = ApiClient(api_cfg, client=backend)
    with pytest.raises(RequestError, match="403"):
        request_summary(api, {"applicantId": 11})
