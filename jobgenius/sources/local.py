"""Local job corpus: a YAML file under data/, or built-in sample postings."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from jobgenius.config import JOBS_PATH
from jobgenius.log import get_logger
from jobgenius.models import InvalidRecord, JobPosting
from jobgenius.sources.base import JobSource

log = get_logger(__name__)

SAMPLE_JOBS: list[dict[str, Any]] = [
    {
        "id": "1",
        "title": "Senior Frontend Developer",
        "company": "Aurora Consulting",
        "location": "San Francisco, CA",
        "description": "We're looking for a senior frontend developer with React and "
                       "TypeScript experience to join our growing team.",
        "salary": "$130K - $150K",
        "job_type": "Remote",
        "source": "LinkedIn",
        "link": "https://example.com/job1",
        "skills": ["React.js", "TypeScript", "Redux", "CSS-in-JS"],
    },
    {
        "id": "2",
        "title": "UI/UX Designer",
        "company": "TechFlow Inc.",
        "location": "New York, NY",
        "description": "Design beautiful, intuitive interfaces for our enterprise clients.",
        "salary": "$110K - $130K",
        "job_type": "Hybrid",
        "source": "Indeed",
        "link": "https://example.com/job2",
        "skills": ["Figma", "UI Design", "User Research", "Prototyping"],
    },
    {
        "id": "3",
        "title": "Frontend Developer",
        "company": "Quantum Systems",
        "location": "Boston, MA",
        "description": "Work on cutting-edge web applications with modern JavaScript frameworks.",
        "salary": "$100K - $120K",
        "job_type": "Remote",
        "source": "Glassdoor",
        "link": "https://example.com/job3",
        "skills": ["React.js", "JavaScript", "HTML", "CSS"],
    },
    {
        "id": "4",
        "title": "Product Designer",
        "company": "Nova Creative",
        "location": "Seattle, WA",
        "description": "Join our product team to create amazing user experiences.",
        "salary": "$120K - $140K",
        "job_type": "On-site",
        "source": "LinkedIn",
        "link": "https://example.com/job4",
        "skills": ["Product Design", "UI/UX", "Design Systems", "Wireframing"],
    },
    {
        "id": "5",
        "title": "UX Researcher",
        "company": "Insight Partners",
        "location": "Chicago, IL",
        "description": "Conduct user research to improve our products and services.",
        "salary": "$90K - $110K",
        "job_type": "Remote",
        "source": "Indeed",
        "link": "https://example.com/job5",
        "skills": ["User Research", "Usability Testing", "Data Analysis", "Interviewing"],
    },
    {
        "id": "6",
        "title": "Senior UI Designer",
        "company": "Stellar Digital",
        "location": "Austin, TX",
        "description": "Lead UI design initiatives for our flagship products.",
        "salary": "$125K - $145K",
        "job_type": "Remote",
        "source": "Glassdoor",
        "link": "https://example.com/job6",
        "skills": ["UI Design", "Design Systems", "Figma", "Adobe Creative Suite"],
    },
]


def parse_records(records: list[Any]) -> list[JobPosting]:
    jobs: list[JobPosting] = []
    for i, rec in enumerate(records):
        try:
            jobs.append(JobPosting.from_dict(rec))
        except InvalidRecord as exc:
            log.warning("Skipping local job #%d: %s", i, exc)
    return jobs


class LocalJobSource(JobSource):
    name = "local"

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or JOBS_PATH

    def _load_records(self) -> list[Any]:
        if not self.path.exists():
            log.debug("No %s — using built-in sample jobs", self.path.name)
            return SAMPLE_JOBS
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or []
        except (OSError, yaml.YAMLError) as exc:
            log.warning("Could not read %s: %s", self.path, exc)
            return []
        if isinstance(data, dict):
            data = data.get("jobs") or []
        if not isinstance(data, list):
            log.warning("%s must hold a list of jobs", self.path.name)
            return []
        return data

    def fetch_all(self) -> list[JobPosting]:
        jobs = parse_records(self._load_records())
        log.info("Local source loaded %d jobs", len(jobs))
        return jobs
