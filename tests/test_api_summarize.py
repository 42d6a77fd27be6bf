from datetime import datetime

import jwt
import pytest
from fastapi.testclient import TestClient

import api_server
from api.auth import identity_from_token
from api.routes import get_gateway
from config.settings import settings
from conftest import USERNAME, FakeLlmClient, FakeLlmResponse, llm_reply
from summarization import SummaryGateway


SECRET = "test-signing-secret-with-enough-length-0123456789"
ENDPOINT = "/api/summarize-applicant"


def _token(**claims) -> str:
    return jwt.encode(claims, SECRET, algorithm="HS256")


def _headers(token: str) -> dict:
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "Prefer": "return=representation",
    }


@pytest.fixture
def client():
    with TestClient(api_server.app) as test_client:
        yield test_client
    api_server.app.dependency_overrides.clear()


def test_placeholder_summary_without_generation_key(client, summary_payload, monkeypatch) -> None:
    monkeypatch.setattr(settings, "GENAI_API_KEY", None, raising=False)

    response = client.post(ENDPOINT, json=summary_payload, headers=_headers(_token(username=USERNAME)))

    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["isPlaceholder"] is True
    assert summary["overview"] and summary["recommendation"]
    assert "GENAI_API_KEY" in summary["overview"]
    datetime.fromisoformat(summary["generatedAt"].replace("Z", "+00:00"))


def test_empty_generation_key_also_selects_placeholder(client, summary_payload, monkeypatch) -> None:
    monkeypatch.setattr(settings, "GENAI_API_KEY", "", raising=False)
    response = client.post(ENDPOINT, json=summary_payload, headers=_headers(_token(username=USERNAME)))
    assert response.status_code == 200
    assert response.json()["summary"]["isPlaceholder"] is True


def test_missing_applicant_id_is_validation_error(client, summary_payload) -> None:
    summary_payload.pop("applicantId")

    response = client.post(ENDPOINT, json=summary_payload, headers=_headers(_token(username=USERNAME)))

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert ["applicantId"] in [detail["path"] for detail in error["details"]]


def test_malformed_json_is_validation_error(client) -> None:
    response = client.post(
        ENDPOINT,
        content="{not json",
        headers=_headers(_token(username=USERNAME)),
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_missing_credential_is_unauthenticated(client, summary_payload) -> None:
    response = client.post(ENDPOINT, json=summary_payload)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


def test_unparseable_credential_is_unauthenticated(client, summary_payload) -> None:
    response = client.post(ENDPOINT, json=summary_payload, headers=_headers("not-a-jwt"))
    assert response.status_code == 401


def test_identity_mismatch_is_forbidden(client, summary_payload) -> None:
    response = client.post(ENDPOINT, json=summary_payload, headers=_headers(_token(username="intruder")))
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


def test_live_generation_through_endpoint(client, summary_payload, live_generation) -> None:
    llm = FakeLlmClient(
        llm_reply('{"overview": "Good.", "strengths": ["Clear"], "risks": [], "recommendation": "Advance."}')
    )
    api_server.app.dependency_overrides[get_gateway] = lambda: SummaryGateway(live_generation, client=llm)

    response = client.post(ENDPOINT, json=summary_payload, headers=_headers(_token(sub=USERNAME)))

    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["isPlaceholder"] is False
    assert summary["recommendation"] == "Advance."


def test_rate_limited_provider(client, summary_payload, live_generation) -> None:
    llm = FakeLlmClient(FakeLlmResponse(429, {"error": {"type": "rate_limit"}}))
    api_server.app.dependency_overrides[get_gateway] = lambda: SummaryGateway(live_generation, client=llm)

    response = client.post(ENDPOINT, json=summary_payload, headers=_headers(_token(username=USERNAME)))

    assert response.status_code == 429
    assert response.json() == {
        "error": {"code": "RATE_LIMITED", "message": "The summary service is busy. Please try again shortly."}
    }


def test_identity_claims() -> None:
    assert identity_from_token(_token(username="s1", sub="other")) == "s1"
    assert identity_from_token(_token(sub="s2")) == "s2"
    assert identity_from_token(_token(role="anon")) is None
    assert identity_from_token("garbage") is None


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}
