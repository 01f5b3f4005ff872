"""Score job postings against a skill set and rank them.

Weighting per user skill (normalized):

  - exact match with a job skill tag               → 2
  - partial match (substring either way), no exact  → 1
  - mentioned in the job title                      → +1
  - mentioned in the job description                → +0.5

Total credit is divided by ``2 * len(user_skills)`` and reported as an
integer percentage clamped to 0..100. A job with no skill tags is scored on
title/description mentions alone with the same denominator.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from jobgenius.log import get_logger
from jobgenius.models import JobMatch, JobPosting, Skill
from jobgenius.skills import normalize, normalize_all, round_half_up

log = get_logger(__name__)

EXACT_WEIGHT = 2.0
PARTIAL_WEIGHT = 1.0
TITLE_WEIGHT = 1.0
DESCRIPTION_WEIGHT = 0.5
MAX_SKILL_WEIGHT = 2.0

# Caps for the supplementary reason lines
_MAX_LISTED = 5


def _job_tags(job: JobPosting) -> list[str]:
    tags = [normalize(t) for t in (job.skills or [])]
    return list(dict.fromkeys(t for t in tags if t))


def _is_partial(skill: str, tags: list[str]) -> bool:
    return any(skill in tag or tag in skill for tag in tags)


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def _listing(label: str, names: list[str]) -> str:
    shown = ", ".join(names[:_MAX_LISTED])
    extra = len(names) - _MAX_LISTED
    if extra > 0:
        shown += f" (+{extra} more)"
    return f"{label}: {shown}"


def score_job(job: JobPosting, user_skills: Iterable[Skill | str]) -> JobMatch:
    skills = normalize_all(user_skills)
    tags = _job_tags(job)
    tag_set = set(tags)
    title = normalize(job.title)
    desc = normalize(job.description)

    credit = 0.0
    exact: list[str] = []
    partial: list[str] = []
    in_title: list[str] = []

    for s in skills:
        if s in tag_set:
            credit += EXACT_WEIGHT
            exact.append(s)
        elif _is_partial(s, tags):
            credit += PARTIAL_WEIGHT
            partial.append(s)
        if s in title:
            credit += TITLE_WEIGHT
            in_title.append(s)
        if s in desc:
            credit += DESCRIPTION_WEIGHT

    if skills:
        score = _clamp(round_half_up(credit / (MAX_SKILL_WEIGHT * len(skills)) * 100))
    else:
        score = 0

    # --- Reasons: overlap count always leads ---
    owned = set(skills)
    covered = sum(1 for t in tags if t in owned)
    reasons: list[str] = [f"You have {covered} of {len(tags)} required skills"]
    if exact:
        reasons.append(_listing("Matching skills", exact))
    if partial:
        reasons.append(_listing("Related skills", partial))
    if in_title:
        reasons.append(_listing("Mentioned in the job title", in_title))
    if not tags:
        reasons.append("No required skills listed; scored on title and description")
    if job.location:
        reasons.append(f"Location: {job.location}")
    if job.salary:
        reasons.append(f"Salary listed: {job.salary}")
    if job.job_type:
        reasons.append(f"Job type: {job.job_type}")

    return JobMatch(job=job.with_score(score), match_score=score, match_reasons=reasons)


def rank_jobs(
    jobs: Sequence[JobPosting],
    user_skills: Iterable[Skill | str],
    min_score: int = 0,
) -> list[JobMatch]:
    """Score every job once and order by descending score.

    ``sorted`` is stable, so equal scores keep their input order.
    """
    skills = normalize_all(user_skills)
    scored = [score_job(j, skills) for j in jobs]
    result = sorted(
        (m for m in scored if m.match_score >= min_score),
        key=lambda m: -m.match_score,
    )
    log.info("Scored %d jobs → %d at or above %d%%", len(scored), len(result), min_score)
    return result
