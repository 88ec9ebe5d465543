from __future__ import annotations

from pathlib import Path
from typing import Any

from src.github_client import GitHubClient
from src.skills import load_skills_data

GOOD_FIRST_ISSUE = "good first issue"
TOP_SKILLS = 3
MAX_RECOMMENDATIONS = 5
MAX_BEGINNER = 3


def _label_names(issue: dict[str, Any]) -> set[str]:
    names = set()
    for label in issue.get("labels") or []:
        if isinstance(label, dict):
            names.add(str(label.get("name") or ""))
        else:
            names.add(str(label))
    return names


def recommend_issues(username: str, skills_data: dict[str, Any], issues: list[dict[str, Any]]) -> dict[str, Any]:
    """Rank ``issues`` against ``username``'s top skills.

    Each issue scores the summed level of every top skill whose name appears
    in its lower-cased title and body. Unscored ``good first issue`` issues
    are offered as beginner picks instead.
    """
    profile = skills_data.get(username)
    if not isinstance(profile, dict):
        return {"recommendations": [], "beginner": True}

    user_skills: dict[str, float] = profile.get("skills") or {}
    top = sorted(user_skills, key=lambda s: user_skills[s], reverse=True)[:TOP_SKILLS]

    recommendations: list[dict[str, Any]] = []
    beginner: list[dict[str, Any]] = []

    for issue in issues:
        text = f"{issue.get('title') or ''} {issue.get('body') or ''}".lower()
        matched = [s for s in top if s in text]
        score = sum(user_skills[s] for s in matched)

        if score > 0:
            recommendations.append(
                {
                    "number": issue.get("number"),
                    "title": issue.get("title"),
                    "score": score,
                    "matchedSkills": matched,
                    "url": issue.get("html_url"),
                }
            )
        elif GOOD_FIRST_ISSUE in _label_names(issue):
            beginner.append(
                {
                    "number": issue.get("number"),
                    "title": issue.get("title"),
                    "url": issue.get("html_url"),
                }
            )

    recommendations.sort(key=lambda r: r["score"], reverse=True)
    return {
        "recommendations": recommendations[:MAX_RECOMMENDATIONS],
        "beginner": beginner[:MAX_BEGINNER],
        "topSkills": top,
    }


def fetch_and_recommend(client: GitHubClient, username: str, skills_path: str | Path) -> dict[str, Any]:
    data = load_skills_data(skills_path)
    if username not in data:
        return recommend_issues(username, data, [])
    issues = client.list_issues(state="open", labels=GOOD_FIRST_ISSUE, per_page=20)
    return recommend_issues(username, data, issues)


def format_recommendations(username: str, result: dict[str, Any]) -> str:
    lines = [f"Recommendations for {username}:"]
    if result.get("beginner") is True:
        lines.append("No skill profile yet; start with beginner issues.")
        return "\n".join(lines)
    lines.append(f"Top skills: {', '.join(result.get('topSkills') or [])}")
    lines.append("Skill-matched issues:")
    for r in result.get("recommendations") or []:
        lines.append(f"  #{r['number']}: {r['title']} (score: {r['score']})")
    lines.append("Beginner issues:")
    for b in result.get("beginner") or []:
        lines.append(f"  #{b['number']}: {b['title']}")
    return "\n".join(lines)
