"""DuckDuckGo lite search results scraped as a job feed.

Company/location extraction from snippets is heuristic and often wrong;
postings from here carry no skill tags and should be treated as low quality.
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

SEARCH_URL = "https://lite.duckduckgo.com/lite"

_RESULT_RE = re.compile(r'<a class="result-link" href="([^"]+)">(.*?)</a>', re.S)
_SNIPPET_RE = re.compile(r'<a class="result-snippet".*?>(.*?)</a>', re.S)
_TAG_RE = re.compile(r"</?[^>]+(>|$)")
_COMPANY_RES = (
    re.compile(r"(at|by|from|via)\s+([A-Za-z0-9\s]+)[\s-]"),
    re.compile(r"([A-Za-z0-9\s]+)\s+(-|–)\s+"),
)
_LOCATION_RES = (
    re.compile(r"\s+in\s+([A-Za-z0-9\s,]+)"),
    re.compile(r"([A-Za-z]+,\s*[A-Z]{2})"),
)

JOB_KEYWORDS: tuple[str, ...] = (
    "job", "career", "position", "hiring", "employment", "work", "opportunity",
    "full-time", "part-time", "remote", "hybrid", "onsite", "salary",
)


def strip_tags(html: str) -> str:
    return _TAG_RE.sub("", html)


def looks_like_job(title: str, description: str) -> bool:
    text = f"{title} {description}".lower()
    return any(k in text for k in JOB_KEYWORDS)


def _company(text: str) -> str:
    m = _COMPANY_RES[0].search(text)
    if m:
        return m.group(2).strip()
    m = _COMPANY_RES[1].search(text)
    return m.group(1).strip() if m else ""


def _location(text: str) -> str:
    for pattern in _LOCATION_RES:
        m = pattern.search(text)
        if m:
            return m.group(1).strip()
    return ""


def extract_listings(html: str) -> list[dict[str, str]]:
    """Pair result links with snippets and keep the job-looking ones."""
    snippets = [strip_tags(s).strip() for s in _SNIPPET_RE.findall(html)]
    results: list[dict[str, str]] = []
    for i, (url, raw_title) in enumerate(_RESULT_RE.findall(html)):
        title = strip_tags(raw_title).strip()
        description = snippets[i] if i < len(snippets) else ""
        if not looks_like_job(title, description):
            continue
        results.append({
            "url": url.strip(),
            "title": title,
            "description": description,
            "company": _company(description),
            "location": _location(description),
        })
    return results


class DuckDuckGoSource(JobSource):
    name = "duckduckgo"

    def __init__(self, default_query: str = "", location: str | None = None,
                 timeout: float = 15.0) -> None:
        self.default_query = default_query
        self.location = location
        self.timeout = timeout

    @retry(max_attempts=2, base_delay=1.5, retryable=(requests.RequestException, OSError))
    def _fetch_html(self, search_query: str) -> str:
        r = requests.get(
            SEARCH_URL,
            params={"q": search_query},
            headers={"User-Agent": "Mozilla/5.0 (compatible; jobgenius)"},
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.text

    def fetch_all(self) -> list[JobPosting]:
        if not self.default_query:
            return []
        return self.search(self.default_query)

    def search(self, query: str) -> list[JobPosting]:
        if not query:
            return self.fetch_all()
        search_query = f"{query} jobs in {self.location}" if self.location else f"{query} jobs"
        try:
            html = self._fetch_html(search_query)
        except Exception as exc:
            log.warning("DuckDuckGo search=%r error: %s", search_query, exc)
            return []

        jobs: list[JobPosting] = []
        for listing in extract_listings(html):
            jobs.append(
                JobPosting(
                    id=hashlib.sha256(listing["url"].encode()).hexdigest()[:12],
                    title=listing["title"],
                    company=listing["company"] or "Company via DuckDuckGo",
                    location=listing["location"] or self.location or "Remote",
                    description=listing["description"] or "Click to view full job details",
                    link=listing["url"],
                    source="DuckDuckGo",
                )
            )
        log.debug("DuckDuckGo search=%r returned %d listings", search_query, len(jobs))
        return jobs
