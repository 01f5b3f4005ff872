# Ensure project root on sys.path for pytest, and keep log files out of the tree
import os
import sys
from pathlib import Path

os.environ.setdefault("JOBGENIUS_LOG_FILE", "0")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from jobgenius.models import JobPosting


def make_job(job_id="1", title="Engineer", skills=None, description="", **kwargs):
    return JobPosting(
        id=job_id,
        title=title,
        company=kwargs.pop("company", "Acme"),
        location=kwargs.pop("location", "Remote"),
        description=description,
        skills=list(skills) if skills is not None else [],
        **kwargs,
    )


@pytest.fixture
def react_job():
    return make_job("r1", title="React Developer", skills=["React", "TypeScript"])


@pytest.fixture
def corpus():
    return [
        make_job("1", title="Backend Engineer", skills=["Python", "Docker", "SQL"]),
        make_job("2", title="DevOps Engineer", skills=["Docker", "Kubernetes", "AWS"]),
        make_job("3", title="Data Engineer", skills=["Python", "Spark"]),
        make_job("4", title="Frontend Engineer", skills=["React", "CSS"]),
    ]


@pytest.fixture
def job_factory():
    return make_job


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip retry backoff waits."""
    monkeypatch.setattr("jobgenius.retry.time.sleep", lambda _s: None)
