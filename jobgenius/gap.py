"""Skills-gap analysis: in-demand skills missing from the user's set."""
from __future__ import annotations

from typing import Iterable, Sequence

from jobgenius.log import get_logger
from jobgenius.models import JobPosting, Skill, SkillGapEntry
from jobgenius.skills import normalize, normalize_all, round_half_up

log = get_logger(__name__)

DEFAULT_TOP_N = 5


def skill_frequencies(jobs: Sequence[JobPosting]) -> dict[str, int]:
    """Count jobs listing each normalized tag, in first-seen order.

    A tag repeated within one job's list counts once for that job.
    """
    counts: dict[str, int] = {}
    for job in jobs:
        tags = dict.fromkeys(normalize(t) for t in (job.skills or []))
        for tag in tags:
            if tag:
                counts[tag] = counts.get(tag, 0) + 1
    return counts


def analyze_gap(
    jobs: Sequence[JobPosting],
    user_skills: Iterable[Skill | str],
    top_n: int = DEFAULT_TOP_N,
) -> list[SkillGapEntry]:
    if not jobs:
        return []

    owned = set(normalize_all(user_skills))
    total = len(jobs)
    entries = [
        SkillGapEntry(name=name, impact_percent=min(100, round_half_up(100 * count / total)))
        for name, count in skill_frequencies(jobs).items()
        if name not in owned
    ]
    # Stable sort keeps first-seen order among equal impacts
    entries.sort(key=lambda e: -e.impact_percent)
    log.debug("Skills gap over %d jobs: %d missing skills", total, len(entries))
    return entries[:top_n]
