"""Client core for the interview campaign backend."""
from .counts import count_applicants_for_interview, count_questions_for_interview, fetch_count
from .dispatcher import ApiClient, HttpClient, RequestError, merge_identity
from .listings import fetch_interviews_with_counts, save_interview_and_reload, search_questions
from .models import Applicant, ApplicantAnswer, Interview, InterviewWithCounts, Question
from .query import build_query, build_question_search, eq, ilike, order_by, page_window
from .resources import (
    AdminApi,
    ApiPayloadError,
    ApplicantAnswerClient,
    ApplicantClient,
    InterviewClient,
    QuestionClient,
    ResourceClient,
)
from .summaries import build_summary_request, load_summary_request, request_summary

__all__ = [
    "AdminApi",
    "ApiClient",
    "ApiPayloadError",
    "Applicant",
    "ApplicantAnswer",
    "ApplicantAnswerClient",
    "ApplicantClient",
    "HttpClient",
    "Interview",
    "InterviewClient",
    "InterviewWithCounts",
    "Question",
    "QuestionClient",
    "RequestError",
    "ResourceClient",
    "build_query",
    "build_question_search",
    "build_summary_request",
    "count_applicants_for_interview",
    "count_questions_for_interview",
    "eq",
    "fetch_count",
    "fetch_interviews_with_counts",
    "ilike",
    "load_summary_request",
    "merge_identity",
    "order_by",
    "page_window",
    "request_summary",
    "save_interview_and_reload",
    "search_questions",
]
