# src/config.py

import os
from dataclasses import dataclass, field

# --- Base paths ---
# Project root can be overridden if needed (e.g. for tests or deployment)
BASE_DIR = os.path.abspath(os.getenv("PLAYGROUND_BASE_DIR", os.path.join(os.path.dirname(__file__), "..")))


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# ---------------------------
# Structured configuration
# ---------------------------

@dataclass(frozen=True)
class PathsConfig:
    """Filesystem and path configuration.

    Values can be overridden via environment variables:
    - PLAYGROUND_MANIFEST
    - PLAYGROUND_LEGACY_CATALOG
    - PLAYGROUND_PROJECTS_DIR
    - PLAYGROUND_STATE_FILE
    - PLAYGROUND_SKILLS_FILE

    Catalog locations may be local paths or http(s) URLs.
    """

    manifest: str = field(
        default_factory=lambda: os.getenv(
            "PLAYGROUND_MANIFEST", os.path.join(BASE_DIR, "project-manifest.json")
        )
    )
    legacy_catalog: str = field(
        default_factory=lambda: os.getenv(
            "PLAYGROUND_LEGACY_CATALOG", os.path.join(BASE_DIR, "projects.json")
        )
    )
    projects_dir: str = field(
        default_factory=lambda: os.getenv(
            "PLAYGROUND_PROJECTS_DIR", os.path.join(BASE_DIR, "projects")
        )
    )
    state_file: str = field(
        default_factory=lambda: os.getenv(
            "PLAYGROUND_STATE_FILE", os.path.join(BASE_DIR, "ui_state", "local_storage.json")
        )
    )
    skills_file: str = field(
        default_factory=lambda: os.getenv(
            "PLAYGROUND_SKILLS_FILE", os.path.join(BASE_DIR, "scripts", "contributor-skills.json")
        )
    )


@dataclass(frozen=True)
class ShowcaseConfig:
    """Presentation defaults for the project grid."""

    items_per_page: int = field(default_factory=lambda: _env_int("PLAYGROUND_ITEMS_PER_PAGE", 12))
    http_timeout: float = field(default_factory=lambda: _env_float("PLAYGROUND_HTTP_TIMEOUT", 10.0))
    default_sort: str = "default"
    default_view: str = "card"
    repo_url: str = "https://github.com/YadavAkhileshh/OpenPlayground"
    ratings_key: str = "projectRatings"
    bookmarks_key: str = "bookmarks"


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub REST settings used by the contributor and skill scripts.

    Values can be overridden via environment variables:
    - GITHUB_TOKEN
    - REPO_OWNER
    - REPO_NAME
    """

    api_url: str = "https://api.github.com"
    token: str | None = field(default_factory=lambda: os.getenv("GITHUB_TOKEN") or None)
    owner: str = field(default_factory=lambda: os.getenv("REPO_OWNER", "YadavAkhileshh"))
    repo: str = field(default_factory=lambda: os.getenv("REPO_NAME", "OpenPlayground"))
    timeout: float = field(default_factory=lambda: _env_float("PLAYGROUND_HTTP_TIMEOUT", 10.0))
    per_page: int = 100


PATHS = PathsConfig()
SHOWCASE = ShowcaseConfig()
GITHUB = GitHubConfig()

# Flat aliases used by UI/CLI code.
MANIFEST_PATH = PATHS.manifest
LEGACY_CATALOG_PATH = PATHS.legacy_catalog
PROJECTS_DIR = PATHS.projects_dir
STATE_FILE = PATHS.state_file
SKILLS_FILE = PATHS.skills_file
ITEMS_PER_PAGE = SHOWCASE.items_per_page
HTTP_TIMEOUT = SHOWCASE.http_timeout
REPO_URL = SHOWCASE.repo_url


def get_github_config(*, owner: str | None = None, repo: str | None = None, token: str | None = None) -> GitHubConfig:
    """Return a GitHubConfig with optional explicit overrides applied.

    Environment values are re-read on every call so CLI scripts pick up
    variables exported after import.
    """
    base = GitHubConfig()
    return GitHubConfig(
        api_url=base.api_url,
        token=token if token is not None else base.token,
        owner=owner or base.owner,
        repo=repo or base.repo,
        timeout=base.timeout,
        per_page=base.per_page,
    )
