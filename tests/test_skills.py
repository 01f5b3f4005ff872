from jobgenius.models import Skill
from jobgenius.skills import normalize, normalize_all, round_half_up


def test_normalize_trims_and_lowercases():
    assert normalize("  TypeScript ") == "typescript"


def test_normalize_empty_and_none():
    assert normalize("") == ""
    assert normalize(None) == ""


def test_normalize_all_dedups_keeping_first_seen_order():
    res = normalize_all(["Python", "sql", " python ", "SQL", "Go"])
    assert res == ["python", "sql", "go"]


def test_normalize_all_accepts_skill_records_and_drops_blanks():
    res = normalize_all([Skill(name="React", level=4), "  ", Skill(name="")])
    assert res == ["react"]


def test_normalize_all_none():
    assert normalize_all(None) == []


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(37.4) == 37
    assert round_half_up(0.5) == 1
    assert round_half_up(0) == 0
