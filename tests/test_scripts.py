from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from scripts import build_manifest, recommend_issues, update_contributor_skills


def test_build_manifest_cli_writes_manifest(tmp_path: Path, capsys) -> None:
    project_dir = tmp_path / "projects" / "snake"
    project_dir.mkdir(parents=True)
    (project_dir / "project.json").write_text(json.dumps({"title": "Snake"}), encoding="utf-8")
    out = tmp_path / "project-manifest.json"

    rc = build_manifest.main(["--projects-dir", str(tmp_path / "projects"), "--output", str(out)])

    assert rc == 0
    manifest = json.loads(out.read_text(encoding="utf-8"))
    assert manifest["count"] == 1
    assert manifest["projects"][0]["folder"] == "snake"
    assert "Wrote 1 projects" in capsys.readouterr().out


def test_update_skills_requires_author(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("PR_AUTHOR", raising=False)

    assert update_contributor_skills.main(["--skills-file", str(tmp_path / "skills.json")]) == 1


def test_update_skills_runs_update(monkeypatch, tmp_path: Path, capsys) -> None:
    calls = {}

    def fake_run_update(client, author, skills_path):
        calls["author"] = author
        calls["path"] = skills_path
        return {"skills": {"python": 1}, "prs": [{}]}

    monkeypatch.setattr(update_contributor_skills, "GitHubClient", MagicMock())
    monkeypatch.setattr(update_contributor_skills, "run_update", fake_run_update)
    skills = str(tmp_path / "skills.json")

    rc = update_contributor_skills.main(["--author", "alice", "--skills-file", skills])

    assert rc == 0
    assert calls == {"author": "alice", "path": skills}
    assert "Updated skills for alice: 1 skills, 1 PRs" in capsys.readouterr().out


@pytest.mark.parametrize("username, expected", [("dana", "Recommendations for dana:"), (None, "Recommendations for Gupta-02:")])
def test_recommend_issues_cli(monkeypatch, tmp_path: Path, capsys, username, expected) -> None:
    monkeypatch.setattr(recommend_issues, "GitHubClient", MagicMock())
    monkeypatch.setattr(
        recommend_issues,
        "fetch_and_recommend",
        lambda client, user, path: {"recommendations": [], "beginner": True},
    )
    argv = ["--skills-file", str(tmp_path / "skills.json")]
    if username:
        argv.insert(0, username)

    assert recommend_issues.main(argv) == 0
    assert capsys.readouterr().out.splitlines()[0] == expected
