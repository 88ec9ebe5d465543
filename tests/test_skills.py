from __future__ import annotations

import json
import random
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.github_client import GitHubError
from src.skills import (
    analyze_skills,
    growth_frame,
    load_profile,
    load_skills_data,
    profile_stats,
    run_update,
    sample_profile,
    top_skills,
    update_contributor_profile,
)


def test_analyze_skills_counts_keyword_hits() -> None:
    assert analyze_skills("Add React component tests") == {"react": 2, "testing": 1}
    assert analyze_skills("") == {}


def test_update_profile_weights_prs_and_commits() -> None:
    data: dict = {}
    update_contributor_profile(
        data,
        "alice",
        prs=[{"number": 1, "title": "Fix python flask api", "body": None, "merged_at": "2025-01-02", "created_at": "2025-01-01"}],
        commits=[{"commit": {"message": "Docker setup"}}],
        repos=[{"language": "Python"}, {"language": None}, {"language": "Python"}],
        today="2025-01-03",
    )

    profile = data["alice"]
    assert profile["skills"] == {"python": 2, "api": 1, "docker": 0.5}
    assert profile["prs"][0]["merged"] is True
    assert profile["languages"] == {"Python": 2}
    assert profile["growth"] == [{"date": "2025-01-03", "prs": 1, "skills": 3}]


def test_update_profile_is_idempotent_per_pr_and_day() -> None:
    data: dict = {}
    pr = {"number": 5, "title": "Add docker", "body": "", "merged_at": None}

    update_contributor_profile(data, "bob", prs=[pr], commits=[], today="2025-02-01")
    update_contributor_profile(data, "bob", prs=[pr], commits=[], today="2025-02-01")

    profile = data["bob"]
    assert len(profile["prs"]) == 1
    assert profile["prs"][0]["merged"] is False
    assert profile["skills"] == {"docker": 1}
    assert len(profile["growth"]) == 1


def test_load_skills_data_handles_missing_and_invalid(tmp_path: Path) -> None:
    assert load_skills_data(tmp_path / "missing.json") == {}

    empty = tmp_path / "empty.json"
    empty.write_text("  ", encoding="utf-8")
    assert load_skills_data(empty) == {}

    wrong = tmp_path / "list.json"
    wrong.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_skills_data(wrong)


def test_run_update_persists_profile_and_tolerates_repo_failure(tmp_path: Path) -> None:
    client = MagicMock()
    client.list_pulls.return_value = [{"number": 9, "title": "Refactor CSS styling", "body": ""}]
    client.list_commits.return_value = []
    client.list_user_repos.side_effect = GitHubError("nope", status_code=404)
    path = tmp_path / "contributor-skills.json"

    profile = run_update(client, "carol", path, today="2025-03-01")

    assert profile["languages"] == {}
    assert profile["skills"]["css"] == 2
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["carol"]["growth"][0]["date"] == "2025-03-01"
    client.list_pulls.assert_called_once_with(author="carol", state="closed", per_page=100)


def test_top_skills_and_stats() -> None:
    profile = {
        "skills": {"css": 1, "python": 4.5, "react": 3},
        "prs": [{}, {}],
        "languages": {"Python": 1},
        "growth": [],
    }

    assert top_skills(profile, 2) == [("python", 4.5), ("react", 3)]
    assert profile_stats(profile) == {"Total PRs": 2, "Skills": 3, "Languages": 1, "Growth Days": 0}


def test_growth_frame_is_sorted_by_date() -> None:
    profile = {
        "growth": [
            {"date": "2025-01-03", "prs": 3, "skills": 2},
            {"date": "2025-01-01", "prs": 1, "skills": 1},
        ]
    }

    df = growth_frame(profile)

    assert list(df.columns) == ["date", "prs", "skills"]
    assert list(df["prs"]) == [1, 3]
    assert growth_frame({}).empty


def test_sample_profile_has_thirty_growth_days() -> None:
    profile = sample_profile(date(2025, 1, 31), random.Random(0))

    assert len(profile["growth"]) == 30
    assert profile["growth"][0]["date"] == "2025-01-31"
    assert profile["growth"][-1]["date"] == "2025-01-02"


def test_load_profile_falls_back_to_sample(tmp_path: Path) -> None:
    path = tmp_path / "contributor-skills.json"
    path.write_text(json.dumps({"alice": {"skills": {"python": 1}}}), encoding="utf-8")

    profile, is_sample = load_profile(path, "alice")
    assert is_sample is False
    assert profile["skills"] == {"python": 1}

    _, is_sample = load_profile(path, "nobody")
    assert is_sample is True

    path.write_text("{broken", encoding="utf-8")
    _, is_sample = load_profile(path, "alice")
    assert is_sample is True
