"""Skill name canonicalization shared by every comparison."""
from __future__ import annotations

import math
from typing import Iterable

from jobgenius.models import Skill


def normalize(name: str | None) -> str:
    return (name or "").lower().strip()


def normalize_all(skills: Iterable[Skill | str] | None) -> list[str]:
    """Normalized, non-empty, de-duplicated names in first-seen order."""
    names: list[str] = []
    for s in skills or []:
        raw = s.name if isinstance(s, Skill) else s
        norm = normalize(raw)
        if norm:
            names.append(norm)
    return list(dict.fromkeys(names))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for the non-negative percentages we report."""
    return int(math.floor(value + 0.5))
