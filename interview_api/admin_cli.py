"""Lightweight CLI helpers for inspecting interview campaigns on the backend."""
from __future__ import annotations

import argparse
import json
from typing import List, Optional

from config import api_config, settings

from .dispatcher import ApiClient
from .listings import fetch_interviews_with_counts, search_questions
from .resources import AdminApi
from .summaries import load_summary_request, request_summary

DELETABLE = {
    "interview": lambda admin: admin.interviews,
    "question": lambda admin: admin.questions,
    "applicant": lambda admin: admin.applicants,
    "applicant_answer": lambda admin: admin.applicant_answers,
}


def list_interviews(admin: AdminApi, limit: int = 20, order: str = "id.desc") -> None:
    for row in fetch_interviews_with_counts(admin, order=order, limit=limit, offset=0):
        print(
            f"[{row.id}] {row.title} ({row.job_role}) status={row.status} "
            f"questions={row.question_count} applicants={row.applicant_count}"
        )


def list_questions(admin: AdminApi, interview_id: int, search_text: str = "", limit: int = 20) -> None:
    for row in search_questions(admin, interview_id=interview_id, order="id.asc", page_size=limit, search_text=search_text):
        print(f"[{row.id}] {row.difficulty}: {row.question}")


def summarize(admin: AdminApi, applicant_id: int) -> None:
    payload = load_summary_request(admin, applicant_id)
    summary = request_summary(ApiClient(api_config(base_url=settings.SUMMARY_API_BASE)), payload)
    print(json.dumps(summary.model_dump(), indent=2))


def delete_record(admin: AdminApi, resource: str, record_id: int) -> None:
    DELETABLE[resource](admin).delete(record_id)
    print(f"Deleted {resource} {record_id}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Interview campaign admin helpers")
    parser.add_argument("--list-interviews", type=int, metavar="LIMIT", help="Show the latest interviews with counts")
    parser.add_argument("--list-questions", type=int, metavar="INTERVIEW_ID", help="Show questions for an interview")
    parser.add_argument("--search", default="", help="Filter questions by text")
    parser.add_argument("--summarize", type=int, metavar="APPLICANT_ID", help="Request a summary for an applicant")
    parser.add_argument("--delete", nargs=2, metavar=("RESOURCE", "ID"), help="Delete one record by id")
    args = parser.parse_args(argv)

    delete_target = None
    if args.delete is not None:
        resource, raw_id = args.delete
        if resource not in DELETABLE:
            parser.error(f"RESOURCE must be one of: {', '.join(sorted(DELETABLE))}")
        try:
            delete_target = (resource, int(raw_id))
        except ValueError:
            parser.error(f"ID must be an integer, got {raw_id!r}")

    actions = (args.list_interviews, args.list_questions, args.summarize, delete_target)
    if all(action is None for action in actions):
        parser.print_help()
        return

    admin = AdminApi(api_config())
    if args.list_interviews is not None:
        list_interviews(admin, args.list_interviews)
    if args.list_questions is not None:
        list_questions(admin, args.list_questions, args.search)
    if args.summarize is not None:
        summarize(admin, args.summarize)
    if delete_target is not None:
        delete_record(admin, *delete_target)


if __name__ == "__main__":
    main()
