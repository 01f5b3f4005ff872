"""Tailor a resume and cover letter to one job posting (generative or template)."""
from __future__ import annotations

from typing import Iterable

from jobgenius.chat import GenerativeTextService
from jobgenius.log import get_logger
from jobgenius.models import JobPosting, ResumeOptimization, Skill
from jobgenius.skills import normalize, normalize_all

log = get_logger(__name__)

COVER_LETTER_SYSTEM_PROMPT = (
    "You write short, professional cover letters for job seekers. "
    "Use the first person and never leave placeholders such as [Your Name]."
)


def missing_keywords(resume_content: str, job: JobPosting) -> list[str]:
    """Job skill tags that the resume text never mentions, in job order."""
    text = normalize(resume_content)
    missing: dict[str, str] = {}
    for tag in job.skills or []:
        key = normalize(tag)
        if key and key not in text:
            missing.setdefault(key, tag)
    return list(missing.values())


def _notes(resume_content: str, job: JobPosting, skills: list[str]) -> list[str]:
    notes: list[str] = []
    missing = missing_keywords(resume_content, job)
    if missing:
        notes.append(f"Add keywords from the job description: {', '.join(missing[:6])}")
    else:
        notes.append("Resume already mentions every listed job skill")
    relevant = [s for s in skills if s in normalize(job.description) or s in normalize(job.title)]
    if relevant:
        notes.append(f"Highlight relevant experience with {', '.join(relevant[:4])}")
    else:
        notes.append("Highlight relevant experience")
    notes.append("Customize the skills section for this role")
    return notes


def _template_letter(job: JobPosting, skills: list[str]) -> str:
    skill_line = ""
    if skills:
        skill_line = f"\n\nMy background includes {', '.join(skills[:5])}, which aligns with your needs."
    return (
        "Dear Hiring Manager,\n\n"
        f"I am excited to apply for the {job.title} position at {job.company}."
        f"{skill_line}\n\n"
        "I would welcome the opportunity to discuss how I can contribute to your team.\n\n"
        "Best regards"
    )


def _prompt(resume_content: str, job: JobPosting, skills: list[str]) -> str:
    return f"""Write a cover letter (under 200 words) for this role.
Job title: {job.title}
Company: {job.company}
Job skills: {', '.join(job.skills or [])}
Job description (excerpt): {job.description[:1500]}
Candidate skills: {', '.join(skills[:8])}
Candidate resume (excerpt): {resume_content[:1500]}

Mention 2-3 relevant skills and end with a one-line call to action."""


def optimize_resume_for_job(
    resume_content: str,
    job: JobPosting,
    user_skills: Iterable[Skill | str],
    service: GenerativeTextService | None = None,
) -> ResumeOptimization:
    skills = normalize_all(user_skills)
    letter = ""
    if service is not None:
        try:
            letter = service.complete(COVER_LETTER_SYSTEM_PROMPT, [], _prompt(resume_content, job, skills))
            log.info("Cover letter generated for %s @ %s", job.title, job.company)
        except Exception as exc:
            log.warning("Cover letter generation failed (%s), using template", exc)
    if not letter:
        letter = _template_letter(job, skills)

    return ResumeOptimization(
        resume_content=resume_content,
        cover_letter_content=letter,
        optimization_notes=_notes(resume_content, job, skills),
    )
