from __future__ import annotations

from typing import Any, Callable

from .base import JobSource, matches_query
from .local import LocalJobSource
from .arbeitnow import ArbeitnowSource
from .duckduckgo import DuckDuckGoSource

from jobgenius.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobSource", "LocalJobSource", "ArbeitnowSource", "DuckDuckGoSource",
    "matches_query", "get_sources",
]


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def get_sources(
    profile: dict, env_getter: Callable[..., str], *, external: bool = False
) -> list[JobSource]:
    """Local corpus by default; live feeds when ``external`` is requested."""
    if not external:
        log.info("Registered source: local corpus")
        return [LocalJobSource()]

    sources: list[JobSource] = [ArbeitnowSource()]
    log.info("Registered source: Arbeitnow (free job board)")

    search_cfg = profile.get("search") or {}
    if _truthy(search_cfg.get("web_search")) or _truthy(env_getter("JOBGENIUS_WEB_SEARCH")):
        roles = profile.get("preferred_roles") or []
        locations = search_cfg.get("locations") or profile.get("locations") or []
        sources.append(
            DuckDuckGoSource(
                default_query=roles[0] if roles else "",
                location=locations[0] if locations else None,
            )
        )
        log.info("Registered source: DuckDuckGo web search")

    return sources
