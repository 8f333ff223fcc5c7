"""Model input text construction."""

from __future__ import annotations

from recruitai.matching.models import Candidate, JobListing

SKILL_SEPARATOR = ", "
JOB_SEPARATOR = " | "


def build_candidate_text(candidate: Candidate) -> str:
    """Summarize a candidate as ``"<name> <skill, skill, ...> <experience>"``."""
    skills = SKILL_SEPARATOR.join(candidate.skills)
    return f"{candidate.name} {skills} {candidate.experience}"


def build_job_text(job: JobListing) -> str:
    """Summarize a job as ``"<title> <skill, skill, ...> <min_experience>"``."""
    skills = SKILL_SEPARATOR.join(job.required_skills)
    return f"{job.title} {skills} {job.min_experience}"


def build_match_input(
    candidate: Candidate, job: JobListing, *, include_job_fields: bool = False
) -> str:
    """Build the text the classifier scores.

    By default only the candidate is described and ``job`` is ignored, so the
    same candidate gets the same score for every listing. Pass
    ``include_job_fields=True`` to append the job summary.
    """
    text = build_candidate_text(candidate)
    if include_job_fields:
        text = f"{text}{JOB_SEPARATOR}{build_job_text(job)}"
    return text
