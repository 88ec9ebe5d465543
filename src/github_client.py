"""Thin GitHub REST client (requests).

One-shot calls only: no retry, backoff or rate-limit handling.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator

import requests

from src.config import GitHubConfig, get_github_config

logger = logging.getLogger(__name__)

_NEXT_LINK_RE = re.compile(r'<([^>]+)>;\s*rel="next"')


class GitHubError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def parse_next_link(link_header: str | None) -> str | None:
    """Return the rel="next" URL from a GitHub Link header, if any."""
    if not link_header:
        return None
    match = _NEXT_LINK_RE.search(link_header)
    return match.group(1) if match else None


class GitHubClient:
    def __init__(
        self,
        config: GitHubConfig | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or get_github_config()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/vnd.github+json"})
        if self.config.token:
            self.session.headers["Authorization"] = f"Bearer {self.config.token}"

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.config.owner}/{self.config.repo}"

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.config.api_url.rstrip('/')}/{path.lstrip('/')}"

    def _request(self, url: str, params: dict[str, Any] | None = None) -> requests.Response:
        resp = self.session.get(url, params=params, timeout=self.config.timeout)
        if resp.status_code >= 400:
            raise GitHubError(
                f"GET {url} failed with HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        return resp

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request(self._url(path), params).json()

    def iter_pages(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        max_pages: int | None = None,
    ) -> Iterator[Any]:
        """Yield items across pages by following rel="next" links."""
        url: str | None = self._url(path)
        page_params = params
        pages = 0
        while url:
            resp = self._request(url, page_params)
            payload = resp.json()
            if not isinstance(payload, list):
                raise GitHubError(f"Expected a JSON list from {url}")
            yield from payload
            pages += 1
            if max_pages is not None and pages >= max_pages:
                break
            url = parse_next_link(resp.headers.get("Link"))
            # The next link already carries the query string.
            page_params = None

    # --- endpoints ------------------------------------------------------

    def list_contributors(self) -> list[dict[str, Any]]:
        return list(
            self.iter_pages(
                f"{self.repo_path}/contributors",
                {"per_page": self.config.per_page},
            )
        )

    def list_issues(
        self,
        *,
        state: str = "open",
        labels: str | None = None,
        per_page: int = 20,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"state": state, "per_page": per_page}
        if labels:
            params["labels"] = labels
        return list(self.get(f"{self.repo_path}/issues", params) or [])

    def list_pulls(self, *, author: str | None = None, state: str = "closed", per_page: int = 100) -> list[dict[str, Any]]:
        pulls = self.get(f"{self.repo_path}/pulls", {"state": state, "per_page": per_page}) or []
        if author is None:
            return list(pulls)
        # The pulls endpoint has no author filter.
        return [p for p in pulls if (p.get("user") or {}).get("login") == author]

    def list_commits(self, *, author: str | None = None, per_page: int = 100) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"per_page": per_page}
        if author:
            params["author"] = author
        return list(self.get(f"{self.repo_path}/commits", params) or [])

    def list_user_repos(self, username: str, *, repo_type: str = "owner", per_page: int = 50) -> list[dict[str, Any]]:
        return list(self.get(f"/users/{username}/repos", {"type": repo_type, "per_page": per_page}) or [])
