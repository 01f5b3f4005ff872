from jobgenius.gap import analyze_gap, skill_frequencies
from jobgenius.models import SkillGapEntry, Skill


def test_docker_in_half_the_corpus(corpus):
    gap = analyze_gap(corpus, ["Python"])
    assert gap[0] == SkillGapEntry("docker", 50)


def test_ties_keep_first_seen_order_and_truncate(corpus):
    gap = analyze_gap(corpus, ["python"])
    assert [(e.name, e.impact_percent) for e in gap] == [
        ("docker", 50),
        ("sql", 25),
        ("kubernetes", 25),
        ("aws", 25),
        ("spark", 25),
    ]


def test_user_skills_excluded_case_insensitively(corpus):
    gap = analyze_gap(corpus, [Skill(name=" DOCKER "), "python"])
    names = {e.name for e in gap}
    assert "docker" not in names
    assert "python" not in names


def test_empty_corpus():
    assert analyze_gap([], ["python"]) == []
    assert analyze_gap([], []) == []


def test_no_gap_when_user_has_everything(job_factory):
    jobs = [job_factory(skills=["Python", "SQL"])]
    assert analyze_gap(jobs, ["sql", "python"]) == []


def test_duplicate_tags_count_once_per_job(job_factory):
    jobs = [job_factory("1", skills=["Docker", "docker ", "DOCKER"]), job_factory("2", skills=["Go"])]
    assert skill_frequencies(jobs) == {"docker": 1, "go": 1}
    assert analyze_gap(jobs, []) == [SkillGapEntry("docker", 50), SkillGapEntry("go", 50)]


def test_impact_rounding(job_factory):
    jobs = [job_factory(str(i), skills=["Go"] if i < 2 else ["Rust"] if i < 3 else []) for i in range(3)]
    gap = analyze_gap(jobs, [])
    assert gap == [SkillGapEntry("go", 67), SkillGapEntry("rust", 33)]


def test_jobs_without_skills_still_count_toward_total(job_factory):
    jobs = [job_factory(str(i)) for i in range(7)] + [job_factory("x", skills=["Kotlin"])]
    jobs[0].skills = None
    assert analyze_gap(jobs, []) == [SkillGapEntry("kotlin", 13)]


def test_top_n_bound_and_range(corpus):
    gap = analyze_gap(corpus, [], top_n=3)
    assert len(gap) == 3
    assert all(0 <= e.impact_percent <= 100 for e in gap)
