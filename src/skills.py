"""Contributor skill tracking.

A contributor profile is a plain JSON object stored per GitHub login in
``contributor-skills.json``::

    {
      "<login>": {
        "skills": {"python": 3.5, ...},
        "prs": [{"number": 1, "title": "...", "body": "...", "merged": true, "created": "..."}],
        "languages": {"Python": 2},
        "growth": [{"date": "2025-01-31", "prs": 4, "skills": 3}]
      }
    }

Skills are inferred by keyword matching over PR titles/bodies (full weight)
and commit messages (half weight). Dashboard helpers at the bottom turn a
profile into tables for display.
"""

from __future__ import annotations

import json
import logging
import random
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pandas as pd
import requests

from src.github_client import GitHubClient, GitHubError

logger = logging.getLogger(__name__)

COMMIT_WEIGHT = 0.5

SKILL_KEYWORDS: dict[str, list[str]] = {
    "react": ["react", "jsx", "component", "frontend", "ui"],
    "javascript": ["javascript", "js", "node", "npm", "webpack"],
    "python": ["python", "django", "flask", "pandas", "numpy"],
    "java": ["java", "spring", "maven", "gradle"],
    "html": ["html", "css", "web", "frontend"],
    "css": ["css", "scss", "sass", "styling"],
    "database": ["sql", "mysql", "postgres", "mongodb", "database"],
    "api": ["api", "rest", "graphql", "backend"],
    "testing": ["test", "jest", "mocha", "unit test"],
    "ml": ["machine learning", "ml", "tensorflow", "pytorch", "ai"],
    "git": ["git", "github", "version control"],
    "docker": ["docker", "container", "kubernetes"],
}


def _today_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def analyze_skills(text: str) -> dict[str, int]:
    """Count keyword hits per skill in lower-cased ``text`` (substring match)."""
    lowered = (text or "").lower()
    skills: dict[str, int] = {}
    for skill, keywords in SKILL_KEYWORDS.items():
        for keyword in keywords:
            if keyword in lowered:
                skills[skill] = skills.get(skill, 0) + 1
    return skills


def empty_profile() -> dict[str, Any]:
    return {"skills": {}, "prs": [], "languages": {}, "growth": []}


def _add_skills(profile: dict[str, Any], found: dict[str, int], weight: float = 1.0) -> None:
    for skill, hits in found.items():
        profile["skills"][skill] = profile["skills"].get(skill, 0) + hits * weight


def update_contributor_profile(
    data: dict[str, Any],
    author: str,
    *,
    prs: list[dict[str, Any]],
    commits: list[dict[str, Any]],
    repos: list[dict[str, Any]] | None = None,
    today: str | None = None,
) -> dict[str, Any]:
    """Fold GitHub activity for ``author`` into ``data`` (mutated and returned)."""
    profile = data.setdefault(author, empty_profile())
    for key, default in empty_profile().items():
        profile.setdefault(key, default)

    known = {p.get("number") for p in profile["prs"]}
    for pr in prs:
        if pr.get("number") in known:
            continue
        profile["prs"].append(
            {
                "number": pr.get("number"),
                "title": pr.get("title"),
                "body": pr.get("body"),
                "merged": pr.get("merged_at") is not None,
                "created": pr.get("created_at"),
            }
        )
        known.add(pr.get("number"))
        _add_skills(profile, analyze_skills(f"{pr.get('title') or ''} {pr.get('body') or ''}"))

    for commit in commits:
        message = ((commit.get("commit") or {}).get("message") or "").lower()
        _add_skills(profile, analyze_skills(message), COMMIT_WEIGHT)

    for repo in repos or []:
        language = repo.get("language")
        if language:
            profile["languages"][language] = profile["languages"].get(language, 0) + 1

    now = today or _today_iso()
    if not any(g.get("date") == now for g in profile["growth"]):
        profile["growth"].append(
            {"date": now, "prs": len(profile["prs"]), "skills": len(profile["skills"])}
        )
    return data


def load_skills_data(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    content = p.read_text(encoding="utf-8").strip()
    if not content:
        return {}
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"{p} must contain a JSON object")
    return data


def save_skills_data(path: str | Path, data: dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def run_update(client: GitHubClient, author: str, skills_path: str | Path, *, today: str | None = None) -> dict[str, Any]:
    """Fetch ``author``'s PRs, commits and repos and persist the updated profile."""
    data = load_skills_data(skills_path)

    prs = client.list_pulls(author=author, state="closed", per_page=100)
    commits = client.list_commits(author=author, per_page=100)

    try:
        repos = client.list_user_repos(author, repo_type="owner", per_page=50)
    except (GitHubError, requests.RequestException) as exc:
        logger.warning("Could not fetch user repos: %s", exc)
        repos = []

    update_contributor_profile(data, author, prs=prs, commits=commits, repos=repos, today=today)
    save_skills_data(skills_path, data)
    logger.info("Updated skills for %s", author)
    return data[author]


# ---------------------------------------------------------------------------
# Dashboard helpers
# ---------------------------------------------------------------------------

def top_skills(profile: dict[str, Any], n: int = 10) -> list[tuple[str, float]]:
    skills = profile.get("skills") or {}
    return sorted(skills.items(), key=lambda kv: kv[1], reverse=True)[:n]


def profile_stats(profile: dict[str, Any]) -> dict[str, int]:
    return {
        "Total PRs": len(profile.get("prs") or []),
        "Skills": len(profile.get("skills") or {}),
        "Languages": len(profile.get("languages") or {}),
        "Growth Days": len(profile.get("growth") or []),
    }


def growth_frame(profile: dict[str, Any]) -> pd.DataFrame:
    rows = profile.get("growth") or []
    df = pd.DataFrame(rows, columns=["date", "prs", "skills"])
    if df.empty:
        return df
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    return df.dropna(subset=["date"]).sort_values("date").reset_index(drop=True)


def sample_profile(today: date | None = None, rng: random.Random | None = None) -> dict[str, Any]:
    """Placeholder profile shown when no real data exists for a user."""
    r = rng or random.Random()
    start = today or datetime.now(timezone.utc).date()
    return {
        "skills": {"javascript": 15, "react": 12, "html": 10, "css": 8, "python": 6, "git": 5},
        "prs": [{} for _ in range(25)],
        "languages": {"JavaScript": 5, "HTML": 3, "CSS": 3, "Python": 2},
        "growth": [
            {
                "date": (start - timedelta(days=i)).isoformat(),
                "prs": r.randrange(25),
                "skills": r.randrange(10),
            }
            for i in range(30)
        ],
    }


def load_profile(skills_path: str | Path, username: str) -> tuple[dict[str, Any], bool]:
    """Return (profile, is_sample) for ``username``.

    Falls back to :func:`sample_profile` when the data file is unreadable or
    the user has no entry.
    """
    try:
        data = load_skills_data(skills_path)
    except (OSError, ValueError) as exc:
        logger.error("Error loading contributor data: %s", exc)
        return sample_profile(), True
    profile = data.get(username)
    if not isinstance(profile, dict):
        return sample_profile(), True
    return profile, False
