from __future__ import annotations  # Prompt composition for applicant summaries

from textwrap import dedent

from .schemas import AnswerRecord, SummaryRequest

NO_RESPONSE = "(no response recorded)"

_CONTRACT = dedent(
    """
    Respond with a JSON object following this contract:
    - overview: two or three sentences describing the applicant's overall performance.
    - strengths: list of one to four short statements grounded in the answers.
    - risks: list of zero to four short statements about gaps or concerns.
    - recommendation: one sentence with a hiring recommendation for the job role.
    Return only JSON without markdown fences, text, or commentary.
    """
).strip()


def build_task(request: SummaryRequest) -> str:  # Build task prompt for LLM
    skills = (request.skillsSummary or "").strip() or "Not provided."
    header = dedent(
        f"""
        Assess a completed job interview and summarise it for the hiring team.
        Job role: {request.jobRole}
        Applicant: {request.applicantName}
        Skills summary: {skills}
        """
    ).strip()
    exchanges = [_format_answer(index, record) for index, record in enumerate(request.answers, start=1)]
    transcript = "\n\n".join(exchanges) if exchanges else NO_RESPONSE
    return f"{header}\n\nInterview transcript:\n{transcript}\n\n{_CONTRACT}"


def _format_answer(index: int, record: AnswerRecord) -> str:
    lines = [f"Q{index}: {record.questionText.strip()}"]
    lines.append(f"A{index}: {record.response_text or NO_RESPONSE}")
    if record.transcript and record.answer and record.transcript.strip() != record.answer.strip():
        lines.append(f"Spoken transcript: {record.transcript.strip()}")
    if record.durationSeconds is not None:
        lines.append(f"Duration: {record.durationSeconds}s")
    return "\n".join(lines)


__all__ = ["build_task"]
