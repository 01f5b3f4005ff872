"""Data models for skills, job postings and engine output."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

CHAT_ROLES: tuple[str, ...] = ("user", "assistant")
MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 5


class InvalidRecord(ValueError):
    """A collaborator-supplied record failed boundary validation."""


def _required_str(data: dict, key: str, kind: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise InvalidRecord(f"{kind} is missing string field {key!r}")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        return str(value)
    return value


def _optional_id(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass
class Skill:
    name: str
    level: int | None = None
    id: str | None = None
    owner_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Skill:
        if not isinstance(data, dict):
            raise InvalidRecord(f"skill record must be a mapping, got {type(data).__name__}")
        name = _required_str(data, "name", "skill")
        level = data.get("level")
        if level is not None:
            if isinstance(level, bool) or not isinstance(level, int):
                raise InvalidRecord(f"skill level must be an integer, got {level!r}")
            if not MIN_SKILL_LEVEL <= level <= MAX_SKILL_LEVEL:
                raise InvalidRecord(
                    f"skill level {level} outside {MIN_SKILL_LEVEL}..{MAX_SKILL_LEVEL}"
                )
        return cls(
            name=name,
            level=level,
            id=_optional_id(data.get("id")),
            owner_id=_optional_id(data.get("owner_id", data.get("userId"))),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "owner_id": self.owner_id, "name": self.name, "level": self.level}


@dataclass
class JobPosting:
    id: str
    title: str
    company: str
    location: str
    description: str
    salary: str | None = None
    job_type: str | None = None
    source: str | None = None
    link: str | None = None
    skills: list[str] = field(default_factory=list)
    match_score: int | None = None
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobPosting:
        """Validate a storage/API record. Any incoming match score is dropped."""
        if not isinstance(data, dict):
            raise InvalidRecord(f"job record must be a mapping, got {type(data).__name__}")
        skills = data.get("skills")
        if skills is None:
            skills = []
        if not isinstance(skills, list) or not all(isinstance(s, str) for s in skills):
            raise InvalidRecord("job skills must be a list of strings")
        return cls(
            id=_optional_id(data.get("id")) or "",
            title=_required_str(data, "title", "job"),
            company=_required_str(data, "company", "job"),
            location=_required_str(data, "location", "job"),
            description=_required_str(data, "description", "job"),
            salary=_optional_str(data, "salary"),
            job_type=_optional_str(data, "job_type") or _optional_str(data, "jobType"),
            source=_optional_str(data, "source"),
            link=_optional_str(data, "link"),
            skills=list(skills),
        )

    def with_score(self, score: int) -> JobPosting:
        """Copy carrying a fresh match score; the original is left alone."""
        return replace(self, skills=list(self.skills or []), match_score=score)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "salary": self.salary,
            "job_type": self.job_type,
            "source": self.source,
            "link": self.link,
            "skills": list(self.skills or []),
            "match_score": self.match_score,
        }


@dataclass
class JobMatch:
    job: JobPosting
    match_score: int
    match_reasons: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "job": self.job.to_dict(),
            "match_score": self.match_score,
            "match_reasons": list(self.match_reasons),
        }


@dataclass(frozen=True)
class SkillGapEntry:
    name: str
    impact_percent: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "impact_percent": self.impact_percent}


@dataclass(frozen=True)
class ChatTurn:
    role: str
    content: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatTurn:
        if not isinstance(data, dict):
            raise InvalidRecord("chat turn must be a mapping")
        role = data.get("role")
        if role not in CHAT_ROLES:
            raise InvalidRecord(f"chat role must be one of {CHAT_ROLES}, got {role!r}")
        return cls(role=role, content=_required_str(data, "content", "chat turn"))

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class ResumeOptimization:
    resume_content: str
    cover_letter_content: str
    optimization_notes: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "resume_content": self.resume_content,
            "cover_letter_content": self.cover_letter_content,
            "optimization_notes": list(self.optimization_notes),
        }
