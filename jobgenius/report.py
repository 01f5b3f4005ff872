"""Markdown report of top job matches and the skills gap."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlparse

from jobgenius.config import REPORTS_DIR
from jobgenius.log import get_logger
from jobgenius.models import JobMatch, SkillGapEntry

log = get_logger(__name__)

TOP_MATCHES = 15


def _short_url_label(url: str) -> str:
    host = (urlparse(url).hostname or "").replace("www.", "")
    parts = host.split(".")
    return parts[0].capitalize() if parts and parts[0] else "Link"


def _truncate(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def build_report(
    matches: list[JobMatch],
    gap: list[SkillGapEntry],
    *,
    skills: list[str] | None = None,
    date: str | None = None,
) -> str:
    date = date or datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [f"# Job Match Report — {date}", ""]

    top = matches[:TOP_MATCHES]
    lines.append(f"**{len(matches)}** jobs ranked | **{len(gap)}** skills to close the gap")
    if skills:
        lines.append(f"Skills considered: {', '.join(skills)}")
    lines.append("")

    if top:
        lines.append("## Top Matches")
        lines.append("")
        for m in top:
            job = m.job
            lines.append(f"### {job.title} @ {job.company}")
            lines.append(f"- **Score:** {m.match_score}%")
            lines.append(f"- **Location:** {job.location}")
            lines.append(f"- **Why:** {'; '.join(m.match_reasons[:4])}")
            if job.link:
                lines.append(f"- **Apply:** [{_short_url_label(job.link)}]({job.link})")
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append("## Quick Reference")
        lines.append("")
        lines.append("| # | Role | Company | Location | Score |")
        lines.append("|--:|------|---------|----------|------:|")
        for i, m in enumerate(top, 1):
            loc = m.job.location.split(",")[0][:18]
            lines.append(
                f"| {i} | {_truncate(m.job.title, 40)} | {_truncate(m.job.company, 22)} "
                f"| {loc} | {m.match_score}% |"
            )
        lines.append("")
    else:
        lines.append("_No jobs in the corpus._")
        lines.append("")

    lines.append("## Skills Gap")
    lines.append("")
    if gap:
        for entry in gap:
            lines.append(f"- **{entry.name}** — requested by {entry.impact_percent}% of jobs")
    else:
        lines.append("_No missing skills found._")
    lines.append("")

    log.info("Built report: %d matches, %d gap skills", len(matches), len(gap))
    return "\n".join(lines)


def write_report(content: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = reports_dir / f"matches_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
