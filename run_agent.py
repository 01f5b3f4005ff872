#!/usr/bin/env python3
"""Entry point: rank jobs against your profile skills, or chat with the assistant."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobgenius.log import get_logger
from jobgenius.config import PROFILE_PATH

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="JobGenius job matching and career chat")
    parser.add_argument("--external", action="store_true", help="Use live job feeds instead of the local corpus")
    parser.add_argument("--query", "-q", default="", help="Only consider jobs matching this text")
    parser.add_argument("--min-score", type=int, help="Drop matches below this score (0-100)")
    parser.add_argument("--no-report", action="store_true", help="Skip writing the Markdown report")
    parser.add_argument("--chat", action="store_true", help="Start an interactive chat session")
    return parser.parse_args(argv)


def _chat_loop() -> None:
    from jobgenius.chat import get_chat_service, respond
    from jobgenius.models import ChatTurn

    service = get_chat_service()
    history: list[ChatTurn] = []
    print("JobGenius AI — type 'quit' to exit.")
    while True:
        try:
            message = input("you> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if message.strip().lower() in ("quit", "exit"):
            return
        reply = respond(message, history, service)
        print(f"ai> {reply}")
        history.extend([ChatTurn("user", message), ChatTurn("assistant", reply)])


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.chat:
        _chat_loop()
        return 0

    if not PROFILE_PATH.exists():
        log.warning("No profile at %s — copy config/profile.example.yaml to get started", PROFILE_PATH)

    from jobgenius.agent import run

    result = run(
        query=args.query,
        external=args.external,
        min_score=args.min_score,
        write=not args.no_report,
    )
    log.info("  Jobs found: %d", result["jobs_found"])
    log.info("  Ranked: %d", len(result["matches"]))
    for m in result["matches"][:5]:
        log.info("  %3d%%  %s @ %s", m.match_score, m.job.title, m.job.company)
    for entry in result["skills_gap"]:
        log.info("  gap: %s (%d%%)", entry.name, entry.impact_percent)
    if result["report_path"]:
        log.info("  Report: %s", result["report_path"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
