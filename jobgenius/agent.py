"""
Job matching run.

Runs: collect jobs → rank against skills → skills gap → (optional) report.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Sequence

from jobgenius.config import ensure_dirs, get_env, load_profile, load_skills
from jobgenius.gap import analyze_gap
from jobgenius.log import get_logger
from jobgenius.models import JobPosting
from jobgenius.report import build_report, write_report
from jobgenius.scorer import rank_jobs
from jobgenius.skills import normalize_all
from jobgenius.sources import JobSource, get_sources

log = get_logger(__name__)


def _query_source(source: JobSource, query: str) -> list[JobPosting]:
    """Wrapper for parallel source queries; a failing source yields nothing."""
    name = source.__class__.__name__
    try:
        results = source.search(query) if query else source.fetch_all()
        log.info("[%s] returned %d jobs", name, len(results))
        return results
    except Exception as exc:
        log.error("[%s] FAILED: %s", name, exc)
        return []


def collect_jobs(sources: Sequence[JobSource], query: str = "") -> list[JobPosting]:
    """Gather postings from every source, de-duplicated by (source, id).

    Output follows source order, then each source's own order, regardless
    of which parallel query finishes first.
    """
    if not sources:
        return []

    by_source: dict[int, list[JobPosting]] = {}
    with ThreadPoolExecutor(max_workers=len(sources)) as pool:
        futures = {pool.submit(_query_source, src, query): i for i, src in enumerate(sources)}
        for future in as_completed(futures):
            by_source[futures[future]] = future.result()

    jobs: list[JobPosting] = []
    seen: set[tuple[str, str]] = set()
    for i in range(len(sources)):
        for job in by_source.get(i, []):
            key = (job.source or sources[i].name, job.id)
            if key in seen:
                continue
            seen.add(key)
            jobs.append(job)
    log.info("Total unique jobs: %d", len(jobs))
    return jobs


def run(
    *,
    query: str = "",
    external: bool = False,
    min_score: int | None = None,
    write: bool = True,
    profile: dict[str, Any] | None = None,
    sources: Sequence[JobSource] | None = None,
) -> dict[str, Any]:
    profile = load_profile() if profile is None else profile
    skills = load_skills(profile)
    if not skills:
        log.warning("No skills in profile — every match score will be 0")

    if sources is None:
        sources = get_sources(profile, get_env, external=external)
    threshold = min_score if min_score is not None else int(profile.get("match_threshold", 0) or 0)

    jobs = collect_jobs(sources, query)
    matches = rank_jobs(jobs, skills, min_score=threshold)
    gap = analyze_gap(jobs, skills)

    report = build_report(matches, gap, skills=normalize_all(skills))
    report_path = None
    if write:
        ensure_dirs()
        report_path = write_report(report)

    log.info(
        "Run complete — jobs=%d, ranked=%d, gap=%d",
        len(jobs), len(matches), len(gap),
    )
    return {
        "jobs_found": len(jobs),
        "matches": matches,
        "skills_gap": gap,
        "report_path": str(report_path) if report_path else None,
        "report_preview": report[:2000] + "..." if len(report) > 2000 else report,
    }
