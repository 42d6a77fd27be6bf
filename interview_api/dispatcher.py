from __future__ import annotations  # Backend request dispatcher

import json
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from config import ApiConfig
from observability import span

from .query import SearchParams, build_query


logger = logging.getLogger(__name__)  # Module logger setup

IDENTITY_FIELD = "username"
ERROR_SNIPPET_LENGTH = 200
METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})
JSON_METHODS = frozenset({"POST", "PATCH"})


class HttpResponse(Protocol):  # Minimal HTTP response protocol
    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def text(self) -> str: ...


class HttpClient(Protocol):  # Minimal HTTP client protocol, satisfied by httpx.Client
    def request(
        self,
        method: str,
        url: str,
        *,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = ...,
    ) -> HttpResponse: ...


class RequestError(RuntimeError):  # Non-success backend response
    def __init__(self, status_code: int, snippet: str) -> None:
        super().__init__(f"Request failed with status {status_code}: {snippet}")
        self.status_code = status_code
        self.snippet = snippet


def merge_identity(body: Any, identity: str) -> Any:
    """Return ``body`` with ``username`` filled in when it is a record that lacks one.

    Caller-supplied values win; arrays and primitives are returned unchanged.
    """

    if not isinstance(body, Mapping):
        return body
    return {IDENTITY_FIELD: identity, **body}


def serialize_body(body: Any) -> str:  # Wire-format a request body
    if isinstance(body, str):
        return body
    return json.dumps(body)


class ApiClient:  # Single choke point for backend calls
    def __init__(self, config: ApiConfig, *, client: Optional[HttpClient] = None) -> None:
        self._config = config
        self._client = client

    @property
    def config(self) -> ApiConfig:
        return self._config

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        search: Optional[SearchParams] = None,
        body: Any = None,
    ) -> Any:  # Send one request and decode the response
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        url = f"{self._config.base_url}{path}{build_query(search)}"

        headers = {
            "Authorization": f"Bearer {self._config.jwt}",
            "Content-Type": "application/json",
        }
        if method in JSON_METHODS:
            headers["Prefer"] = "return=representation"
            body = merge_identity(body, self._config.username)

        content = serialize_body(body) if body is not None else None

        with span("backend.request", path, method=method) as fields:
            response = self._send(method, url, content, headers)
            raw_text = response.text
            fields["status"] = response.status_code

        if not 200 <= response.status_code < 300:
            snippet = raw_text[:ERROR_SNIPPET_LENGTH]
            logger.warning("Backend %s %s failed with status %s", method, path, response.status_code)
            raise RequestError(response.status_code, snippet)

        if not raw_text:
            return None

        content_type = response.headers.get("content-type", "") or ""
        if "application/json" in content_type:
            return json.loads(raw_text)
        return raw_text

    def _send(self, method: str, url: str, content: Optional[str], headers: Dict[str, str]) -> HttpResponse:  # Dispatch over the injected or a per-call client
        timeout = self._config.timeout_s
        if self._client is not None:
            return self._client.request(method, url, content=content, headers=headers, timeout=timeout)
        with httpx.Client(timeout=timeout) as http_client:
            response = http_client.request(method, url, content=content, headers=headers)
            return response


__all__ = [
    "ApiClient",
    "HttpClient",
    "HttpResponse",
    "IDENTITY_FIELD",
    "RequestError",
    "merge_identity",
    "serialize_body",
]
