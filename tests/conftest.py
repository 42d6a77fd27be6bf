import json
import sys
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import ApiConfig, GenerationConfig, LlmRoute
from config.settings import settings


API_BASE = "http://backend.test/api"
USERNAME = "s1234567"
JWT = "test-jwt"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "", content_type: Optional[str] = "application/json") -> None:
        self.status_code = status_code
        self.text = text
        self.headers = {"content-type": content_type} if content_type else {}

    @classmethod
    def json_body(cls, data: Any, status_code: int = 200) -> "FakeResponse":
        return cls(status_code, json.dumps(data))


class FakeBackend:
    """Records every request; answers from a queue, a router callable, or a default."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.router: Optional[Callable[[str, str], FakeResponse]] = None
        self.default = FakeResponse(200, "[]")
        self._queue: List[FakeResponse] = []
        self._lock = threading.Lock()

    def queue(self, *responses: FakeResponse) -> None:
        self._queue.extend(responses)

    def request(self, method, url, *, content=None, headers=None, timeout=None):
        with self._lock:
            self.calls.append(
                {
                    "method": method,
                    "url": url,
                    "content": content,
                    "headers": dict(headers or {}),
                    "timeout": timeout,
                }
            )
            if self._queue:
                return self._queue.pop(0)
        if self.router is not None:
            return self.router(method, url)
        return self.default

    def body(self, index: int = -1) -> Any:
        return json.loads(self.calls[index]["content"])


class FakeLlmResponse:
    def __init__(self, status_code: int = 200, data: Any = None) -> None:
        self.status_code = status_code
        self._data = data
        self.text = json.dumps(data) if data is not None else ""

    def json(self) -> Any:
        if self._data is None:
            raise ValueError("no json")
        return self._data


class FakeLlmClient:
    def __init__(self, response: Any = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, *, json, headers, timeout):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def llm_reply(content: str) -> FakeLlmResponse:
    return FakeLlmResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})


@pytest.fixture
def api_cfg() -> ApiConfig:
    return ApiConfig(base_url=API_BASE, jwt=JWT, username=USERNAME, timeout_s=5.0)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def llm_route() -> LlmRoute:
    return LlmRoute(
        name="test",
        base_url="http://llm.test",
        endpoint="/v1/chat/completions",
        model="test-model",
        timeout_s=1.0,
    )


@pytest.fixture
def live_generation(llm_route) -> GenerationConfig:
    return GenerationConfig(route=llm_route, api_key="genai-test-key")


@pytest.fixture
def placeholder_generation(llm_route) -> GenerationConfig:
    return GenerationConfig(route=llm_route, api_key=None)


@pytest.fixture
def summary_payload() -> Dict[str, Any]:
    return {
        "username": USERNAME,
        "applicantId": 11,
        "interviewId": 5,
        "applicantName": "Ms Grace Hopper",
        "jobRole": "Compiler Engineer",
        "answers": [
            {
                "questionId": 1,
                "questionText": "Describe a compiler you built.",
                "answer": "I wrote the A-0 system.",
                "transcript": None,
                "durationSeconds": 95,
            },
            {
                "questionId": 2,
                "questionText": "How do you debug hardware faults?",
                "answer": None,
                "transcript": None,
            },
        ],
        "skillsSummary": "Compilers, COBOL",
    }


@pytest.fixture(autouse=True)
def no_generation_key(monkeypatch):
    monkeypatch.setattr(settings, "GENAI_API_KEY", None, raising=False)
