"""Update a contributor's skill profile from their GitHub activity.

Intended for CI after a PR merges. Reads the environment:

- PR_AUTHOR   GitHub login to update (or --author)
- REPO_OWNER  / REPO_NAME  repository to inspect
- GITHUB_TOKEN  optional API token

Usage (from repo root):

    PR_AUTHOR=octocat python -m scripts.update_contributor_skills
"""
from __future__ import annotations

import argparse
import logging
import os

import requests

from src import config as config_mod
from src.github_client import GitHubClient, GitHubError
from src.skills import run_update


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Fold a contributor's PRs/commits into contributor-skills.json.")
    p.add_argument("--author", default=os.getenv("PR_AUTHOR"), help="GitHub login. Default: $PR_AUTHOR.")
    p.add_argument("--skills-file", default=config_mod.SKILLS_FILE, help="Path to contributor-skills.json.")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.author:
        print("No author given (set PR_AUTHOR or pass --author).")
        return 1

    client = GitHubClient(config_mod.get_github_config())
    try:
        profile = run_update(client, args.author, args.skills_file)
    except (GitHubError, requests.RequestException, ValueError) as exc:
        print(f"Failed to update skills for {args.author}: {exc}")
        return 1

    print(f"Updated skills for {args.author}: {len(profile['skills'])} skills, {len(profile['prs'])} PRs")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
