from __future__ import annotations

import logging
from dataclasses import dataclass, field

import requests

from src.core.contracts import Contributor
from src.github_client import GitHubClient, GitHubError

logger = logging.getLogger(__name__)

CONTRIBUTORS_ERROR_MESSAGE = "Unable to load contributors"


@dataclass(frozen=True)
class ContributorsResult:
    contributors: list[Contributor] = field(default_factory=list)
    error: str | None = None


def human_contributors(rows: list[dict]) -> list[Contributor]:
    """Map API rows to Contributors, dropping automated ``[bot]`` accounts."""
    out = []
    for row in rows:
        if not isinstance(row, dict) or not row.get("login"):
            continue
        contributor = Contributor.from_dict(row)
        if contributor.is_bot:
            continue
        out.append(contributor)
    return out


def fetch_contributors(client: GitHubClient) -> list[Contributor]:
    return human_contributors(client.list_contributors())


def load_contributors(client: GitHubClient) -> ContributorsResult:
    try:
        return ContributorsResult(contributors=fetch_contributors(client))
    except (requests.RequestException, GitHubError, ValueError) as exc:
        logger.error("Error fetching contributors: %s", exc)
        return ContributorsResult(error=CONTRIBUTORS_ERROR_MESSAGE)
