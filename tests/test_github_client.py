from __future__ import annotations

import pytest

from src.config import GitHubConfig
from src.github_client import GitHubClient, GitHubError, parse_next_link


class FakeResponse:
    def __init__(self, payload, *, status_code: int = 200, headers: dict | None = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.headers = headers or {}

    def json(self):
        return self._payload


class FakeSession:
    """Replays queued responses and records every GET."""

    def __init__(self, responses: list[FakeResponse]) -> None:
        self.headers: dict[str, str] = {}
        self.responses = list(responses)
        self.calls: list[tuple[str, dict | None, float]] = []

    def get(self, url, params=None, timeout=None):  # noqa: ANN001
        self.calls.append((url, params, timeout))
        return self.responses.pop(0)


def _config(**overrides) -> GitHubConfig:
    base = dict(api_url="https://api.github.test", token=None, owner="octo", repo="play", timeout=5.0, per_page=2)
    base.update(overrides)
    return GitHubConfig(**base)


def test_parse_next_link() -> None:
    header = (
        '<https://api.github.test/repos/octo/play/contributors?page=2>; rel="next", '
        '<https://api.github.test/repos/octo/play/contributors?page=5>; rel="last"'
    )

    assert parse_next_link(header) == "https://api.github.test/repos/octo/play/contributors?page=2"
    assert parse_next_link('<https://x.test/?page=1>; rel="prev"') is None
    assert parse_next_link(None) is None


def test_token_sets_bearer_header() -> None:
    session = FakeSession([])
    GitHubClient(_config(token="s3cret"), session=session)

    assert session.headers["Authorization"] == "Bearer s3cret"
    assert session.headers["Accept"] == "application/vnd.github+json"


def test_no_token_means_anonymous() -> None:
    session = FakeSession([])
    GitHubClient(_config(), session=session)

    assert "Authorization" not in session.headers


def test_list_contributors_follows_pagination() -> None:
    next_url = "https://api.github.test/repos/octo/play/contributors?per_page=2&page=2"
    session = FakeSession(
        [
            FakeResponse([{"login": "a"}, {"login": "b"}], headers={"Link": f'<{next_url}>; rel="next"'}),
            FakeResponse([{"login": "c"}]),
        ]
    )
    client = GitHubClient(_config(), session=session)

    rows = client.list_contributors()

    assert [r["login"] for r in rows] == ["a", "b", "c"]
    assert session.calls[0] == ("https://api.github.test/repos/octo/play/contributors", {"per_page": 2}, 5.0)
    assert session.calls[1] == (next_url, None, 5.0)


def test_http_error_raises_github_error() -> None:
    session = FakeSession([FakeResponse({"message": "rate limited"}, status_code=403)])
    client = GitHubClient(_config(), session=session)

    with pytest.raises(GitHubError) as excinfo:
        client.list_contributors()
    assert excinfo.value.status_code == 403


def test_iter_pages_rejects_non_list_payload() -> None:
    session = FakeSession([FakeResponse({"message": "Not Found"})])
    client = GitHubClient(_config(), session=session)

    with pytest.raises(GitHubError):
        client.list_contributors()


def test_list_pulls_filters_by_author() -> None:
    session = FakeSession(
        [
            FakeResponse(
                [
                    {"number": 1, "user": {"login": "alice"}},
                    {"number": 2, "user": {"login": "bob"}},
                    {"number": 3, "user": None},
                ]
            )
        ]
    )
    client = GitHubClient(_config(), session=session)

    pulls = client.list_pulls(author="alice")

    assert [p["number"] for p in pulls] == [1]
    assert session.calls[0][1] == {"state": "closed", "per_page": 100}


def test_list_issues_passes_labels() -> None:
    session = FakeSession([FakeResponse([{"number": 7}])])
    client = GitHubClient(_config(), session=session)

    issues = client.list_issues(labels="good first issue")

    assert issues == [{"number": 7}]
    url, params, _ = session.calls[0]
    assert url == "https://api.github.test/repos/octo/play/issues"
    assert params == {"state": "open", "per_page": 20, "labels": "good first issue"}


def test_list_user_repos_and_commits() -> None:
    session = FakeSession([FakeResponse([{"language": "Python"}]), FakeResponse([])])
    client = GitHubClient(_config(), session=session)

    assert client.list_user_repos("alice") == [{"language": "Python"}]
    assert client.list_commits(author="alice") == []
    assert session.calls[0][:2] == ("https://api.github.test/users/alice/repos", {"type": "owner", "per_page": 50})
    assert session.calls[1][1] == {"per_page": 100, "author": "alice"}
