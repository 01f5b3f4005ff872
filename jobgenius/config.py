"""Load the user profile and env configuration."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

from jobgenius.log import get_logger
from jobgenius.models import InvalidRecord, Skill

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
DATA_DIR: Path = ROOT_DIR / "data"
REPORTS_DIR: Path = ROOT_DIR / "reports"
JOBS_PATH: Path = DATA_DIR / "jobs.yaml"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def get_float_env(key: str, default: float, env_getter: Callable[..., str] = get_env) -> float:
    raw = env_getter(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        log.warning("Ignoring non-numeric %s=%r, using %s", key, raw, default)
        return default


def load_profile(path: Path | None = None) -> dict[str, Any]:
    """Read the YAML profile; a missing file is an empty profile."""
    path = path or PROFILE_PATH
    if not path.exists():
        log.info("No profile at %s, starting with an empty one", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidRecord(f"profile {path.name} must be a mapping")

    # Older profiles kept skills under profile.skills as plain names
    if "skills" not in data and isinstance(data.get("profile"), dict):
        nested = data["profile"].get("skills")
        if nested:
            data["skills"] = nested

    return data


def load_skills(profile: dict[str, Any]) -> list[Skill]:
    """Build validated Skill records from the profile's skills list.

    Entries may be plain names or mappings with name/level; invalid
    entries are logged and dropped.
    """
    skills: list[Skill] = []
    for entry in profile.get("skills") or []:
        try:
            skills.append(Skill.from_dict(entry if isinstance(entry, dict) else {"name": entry}))
        except InvalidRecord as exc:
            log.warning("Skipping skill %r: %s", entry, exc)
    return skills


def ensure_dirs() -> None:
    for d in (CONFIG_DIR, DATA_DIR, REPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)
