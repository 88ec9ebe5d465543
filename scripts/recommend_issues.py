"""Print skill-matched and beginner issues for a contributor.

Usage (from repo root):

    python -m scripts.recommend_issues Gupta-02
"""
from __future__ import annotations

import argparse
import logging

import requests

from src import config as config_mod
from src.github_client import GitHubClient, GitHubError
from src.recommend import fetch_and_recommend, format_recommendations


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Recommend open issues matching a contributor's skills.")
    p.add_argument("username", nargs="?", default="Gupta-02")
    p.add_argument("--skills-file", default=config_mod.SKILLS_FILE, help="Path to contributor-skills.json.")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    client = GitHubClient(config_mod.get_github_config())
    try:
        result = fetch_and_recommend(client, args.username, args.skills_file)
    except (GitHubError, requests.RequestException, ValueError, OSError) as exc:
        print(f"Failed to build recommendations: {exc}")
        return 1

    print(format_recommendations(args.username, result))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
