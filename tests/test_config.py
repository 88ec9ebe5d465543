from __future__ import annotations

from pathlib import Path

from src import config


def test_default_paths_live_under_base_dir() -> None:
    base = Path(config.BASE_DIR)
    paths = config.PathsConfig()

    assert Path(paths.manifest).name == "project-manifest.json"
    assert Path(paths.legacy_catalog).name == "projects.json"
    assert Path(paths.state_file).parent.name == "ui_state"
    assert base in Path(paths.skills_file).parents


def test_path_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PLAYGROUND_MANIFEST", "https://example.org/project-manifest.json")
    monkeypatch.setenv("PLAYGROUND_STATE_FILE", "/tmp/state.json")

    paths = config.PathsConfig()

    assert paths.manifest == "https://example.org/project-manifest.json"
    assert paths.state_file == "/tmp/state.json"


def test_showcase_env_overrides_and_invalid_values(monkeypatch) -> None:
    assert config.ShowcaseConfig().items_per_page > 0

    monkeypatch.setenv("PLAYGROUND_ITEMS_PER_PAGE", "24")
    monkeypatch.setenv("PLAYGROUND_HTTP_TIMEOUT", "2.5")
    cfg = config.ShowcaseConfig()
    assert cfg.items_per_page == 24
    assert cfg.http_timeout == 2.5

    monkeypatch.setenv("PLAYGROUND_ITEMS_PER_PAGE", "0")
    monkeypatch.setenv("PLAYGROUND_HTTP_TIMEOUT", "soon")
    cfg = config.ShowcaseConfig()
    assert cfg.items_per_page == 12
    assert cfg.http_timeout == 10.0


def test_github_config_reads_env_and_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "abc")
    monkeypatch.setenv("REPO_OWNER", "someone")
    monkeypatch.delenv("REPO_NAME", raising=False)

    cfg = config.get_github_config()
    assert cfg.token == "abc"
    assert cfg.owner == "someone"
    assert cfg.repo == "OpenPlayground"

    cfg = config.get_github_config(owner="other", repo="fork", token="")
    assert cfg.owner == "other"
    assert cfg.repo == "fork"
    assert cfg.token == ""
