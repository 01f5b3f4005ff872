from __future__ import annotations

from abc import ABC, abstractmethod

from jobgenius.models import JobPosting


def matches_query(job: JobPosting, query: str) -> bool:
    """Case-insensitive substring match on the searchable job fields."""
    q = query.lower()
    fields = (job.title, job.company, job.description, job.location)
    if any(q in (f or "").lower() for f in fields):
        return True
    return any(q in s.lower() for s in job.skills or [])


class JobSource(ABC):
    """Best-effort job feed: implementations return [] instead of raising."""

    name: str = "unknown"

    @abstractmethod
    def fetch_all(self) -> list[JobPosting]:
        pass

    def search(self, query: str) -> list[JobPosting]:
        jobs = self.fetch_all()
        if not query:
            return jobs
        return [j for j in jobs if matches_query(j, query)]
