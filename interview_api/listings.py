from __future__ import annotations  # Paged listings enriched with child counts

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Optional

from .models import Interview, InterviewWithCounts, Question
from .query import build_question_search, page_window
from .resources import AdminApi


MAX_COUNT_WORKERS = 8


def fetch_interviews_with_counts(
    admin: AdminApi,
    *,
    order: str = "id.desc",
    limit: int = 5,
    offset: int = 0,
) -> List[InterviewWithCounts]:
    """Load one page of interviews and attach question/applicant counts fetched concurrently."""

    interviews = admin.interviews.list({"order": order, "limit": limit, "offset": offset})
    if not interviews:
        return []

    def _enrich(interview: Interview) -> InterviewWithCounts:
        row = interview.model_dump(warnings=False)
        row["question_count"] = admin.interviews.count_questions(interview.id)
        row["applicant_count"] = admin.interviews.count_applicants(interview.id)
        return InterviewWithCounts.from_row(row)

    with ThreadPoolExecutor(max_workers=min(MAX_COUNT_WORKERS, len(interviews))) as pool:
        return list(pool.map(_enrich, interviews))


def save_interview_and_reload(
    admin: AdminApi,
    form: Mapping[str, Any],
    *,
    editing_id: Optional[int],
    order: str,
    page: int,
    page_size: int,
) -> List[InterviewWithCounts]:
    """Create or update an interview, then return the refreshed page."""

    if editing_id is not None:
        admin.interviews.update(editing_id, form)
    else:
        admin.interviews.create(form)
    window = page_window(page, page_size)
    return fetch_interviews_with_counts(admin, order=order, **window)


def search_questions(
    admin: AdminApi,
    *,
    interview_id: Optional[int] = None,
    order: str = "id.desc",
    page: int = 0,
    page_size: int = 10,
    search_text: str = "",
) -> List[Question]:
    search = build_question_search(
        interview_id=interview_id,
        order=order,
        page=page,
        page_size=page_size,
        search_text=search_text,
    )
    return admin.questions.list(search)


__all__ = ["fetch_interviews_with_counts", "save_interview_and_reload", "search_questions"]
