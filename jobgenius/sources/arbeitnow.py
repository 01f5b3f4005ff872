"""Arbeitnow — free job-board API (no API key required).

Docs: https://www.arbeitnow.com/blog/job-board-api
"""
from __future__ import annotations

import hashlib
import re

import requests

from jobgenius.log import get_logger
from jobgenius.models import JobPosting
from jobgenius.retry import retry
from jobgenius.sources.base import JobSource

log = get_logger(__name__)

API_URL = "https://arbeitnow.com/api/job-board-api"


def _job_id(hit: dict) -> str:
    slug = str(hit.get("slug") or "")
    digits = re.sub(r"\D", "", slug)
    if digits:
        return digits
    seed = slug or f"{hit.get('title', '')}{hit.get('company_name', '')}"
    return hashlib.sha256(seed.encode()).hexdigest()[:12]


def _job_type(hit: dict) -> str:
    if hit.get("remote"):
        return "Remote"
    types = hit.get("job_types") or []
    return str(types[0]) if types else "Full-time"


def parse_hit(hit: dict) -> JobPosting:
    tags = hit.get("tags") or []
    return JobPosting(
        id=_job_id(hit),
        title=str(hit.get("title") or ""),
        company=str(hit.get("company_name") or ""),
        location=str(hit.get("location") or "Remote"),
        description=str(hit.get("description") or ""),
        link=hit.get("url"),
        job_type=_job_type(hit),
        source="Arbeitnow",
        skills=[str(t) for t in tags if t],
        raw=hit,
    )


class ArbeitnowSource(JobSource):
    name = "arbeitnow"

    def __init__(self, timeout: float = 15.0) -> None:
        self.timeout = timeout

    @retry(max_attempts=2, base_delay=1.5, retryable=(requests.RequestException, OSError))
    def _fetch(self) -> list[JobPosting]:
        r = requests.get(API_URL, timeout=self.timeout)
        r.raise_for_status()
        data = r.json()
        return [parse_hit(hit) for hit in data.get("data", []) if isinstance(hit, dict)]

    def fetch_all(self) -> list[JobPosting]:
        try:
            jobs = self._fetch()
        except Exception as exc:
            log.warning("Arbeitnow fetch error: %s", exc)
            return []
        log.debug("Arbeitnow returned %d jobs", len(jobs))
        return jobs
