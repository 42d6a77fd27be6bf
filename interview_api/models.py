from __future__ import annotations  # Backend record models

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

# Closed value sets for callers that check form input; decoded rows keep whatever the backend stored.
InterviewStatus = Literal["Draft", "Published", "Archived"]
Difficulty = Literal["Easy", "Intermediate", "Advanced"]
ApplicantStatus = Literal["Not Started", "Completed"]


class BackendRecord(BaseModel):  # Row as returned by the backend, unknown columns kept
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    username: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict):
        """Wrap a decoded row without checking its contents."""

        return cls.model_construct(**row)


class Interview(BackendRecord):  # Interview campaign row
    title: Optional[str] = None
    job_role: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class Question(BackendRecord):  # Question row owned by an interview
    interview_id: Optional[int] = None
    question: Optional[str] = None
    difficulty: Optional[str] = None


class Applicant(BackendRecord):  # Applicant row linked to an interview
    interview_id: Optional[int] = None
    title: Optional[str] = None
    firstname: Optional[str] = None
    surname: Optional[str] = None
    phone_number: Optional[str] = None
    email_address: Optional[str] = None
    interview_status: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(str(part) for part in (self.title, self.firstname, self.surname) if part)


class ApplicantAnswer(BackendRecord):  # Recorded answer for one applicant and question
    interview_id: Optional[int] = None
    question_id: Optional[int] = None
    applicant_id: Optional[int] = None
    answer: Optional[str] = None


class InterviewWithCounts(Interview):  # Interview enriched with child counts for listings
    question_count: int = 0
    applicant_count: int = 0


__all__ = [
    "Applicant",
    "ApplicantAnswer",
    "ApplicantStatus",
    "BackendRecord",
    "Difficulty",
    "Interview",
    "InterviewStatus",
    "InterviewWithCounts",
    "Question",
]
