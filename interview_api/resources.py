from __future__ import annotations  # Per-entity clients built on the dispatcher

import json
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from config import ApiConfig

from .counts import count_applicants_for_interview, count_questions_for_interview, fetch_count
from .dispatcher import ApiClient, HttpClient
from .models import Applicant, ApplicantAnswer, BackendRecord, Interview, Question
from .query import SearchParams, eq


T = TypeVar("T", bound=BackendRecord)

RecordData = Union[Mapping[str, Any], BaseModel]

PREVIEW_LENGTH = 120


class ApiPayloadError(ValueError):  # Backend answered with an unexpected payload shape
    pass


class ResourceClient(Generic[T]):  # list/create/update/delete for one backend table
    def __init__(self, api: ApiClient, path: str, model: Type[T]) -> None:
        self._api = api
        self.path = path
        self.model = model

    def list(self, search: Optional[SearchParams] = None) -> List[T]:
        payload = self._api.request(self.path, search=search)
        if not isinstance(payload, list):
            raise ApiPayloadError(
                f"Unable to load {self._label()}: expected an array response from the API. "
                f"Please verify your API_BASE configuration. Received: {_preview(payload)}"
            )
        return self._wrap(payload)

    def create(self, data: RecordData) -> Optional[List[T]]:
        payload = self._api.request(self.path, method="POST", body=_as_body(data))
        return self._records(payload)

    def update(self, record_id: int, patch: RecordData) -> Optional[List[T]]:
        payload = self._api.request(
            self.path,
            method="PATCH",
            search={"id": eq(record_id)},
            body=_as_body(patch),
        )
        return self._records(payload)

    def delete(self, record_id: int) -> None:
        self._api.request(self.path, method="DELETE", search={"id": eq(record_id)})

    def count(self, search: SearchParams) -> int:
        return fetch_count(self._api, self.path, search)

    def _records(self, payload: Any) -> Optional[List[T]]:  # Representation is an array or a single object
        if payload is None:
            return None
        if isinstance(payload, dict):
            payload = [payload]
        if not isinstance(payload, list):
            raise ApiPayloadError(f"Unexpected {self._label()} response: {_preview(payload)}")
        return self._wrap(payload)

    def _wrap(self, rows: List[Any]) -> List[T]:  # Field contents are left to the caller
        if not all(isinstance(row, dict) for row in rows):
            raise ApiPayloadError(f"Unable to read {self._label()}: expected objects, received: {_preview(rows)}")
        return [self.model.from_row(row) for row in rows]

    def _label(self) -> str:
        return self.path.strip("/").replace("_", " ") + "s"


class InterviewClient(ResourceClient[Interview]):
    def __init__(self, api: ApiClient) -> None:
        super().__init__(api, "/interview", Interview)

    def count_questions(self, interview_id: int) -> int:
        return count_questions_for_interview(self._api, interview_id)

    def count_applicants(self, interview_id: int) -> int:
        return count_applicants_for_interview(self._api, interview_id)


class QuestionClient(ResourceClient[Question]):
    def __init__(self, api: ApiClient) -> None:
        super().__init__(api, "/question", Question)


class ApplicantClient(ResourceClient[Applicant]):
    def __init__(self, api: ApiClient) -> None:
        super().__init__(api, "/applicant", Applicant)


class ApplicantAnswerClient(ResourceClient[ApplicantAnswer]):
    def __init__(self, api: ApiClient) -> None:
        super().__init__(api, "/applicant_answer", ApplicantAnswer)


class AdminApi:  # Facade bundling the four resource clients over one dispatcher
    def __init__(self, config: ApiConfig, *, client: Optional[HttpClient] = None) -> None:
        self.api = ApiClient(config, client=client)
        self.interviews = InterviewClient(self.api)
        self.questions = QuestionClient(self.api)
        self.applicants = ApplicantClient(self.api)
        self.applicant_answers = ApplicantAnswerClient(self.api)


def _as_body(data: RecordData) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return dict(data)


def _preview(payload: Any) -> str:
    text = payload if isinstance(payload, str) else json.dumps(payload, default=str)
    return text[:PREVIEW_LENGTH]


__all__ = [
    "AdminApi",
    "ApiPayloadError",
    "ApplicantAnswerClient",
    "ApplicantClient",
    "InterviewClient",
    "QuestionClient",
    "ResourceClient",
]
