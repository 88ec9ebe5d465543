"""Tests for the key-value stores and the rating/bookmark books built on them."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.core.bookmarks import BookmarkStore
from src.core.contracts import Project, sanitize_key
from src.core.ratings import RatingBook
from src.core.storage import InMemoryStore, JsonFileStore


def test_sanitize_key() -> None:
    assert sanitize_key("Tic Tac-Toe!") == "tic_tac_toe_"
    assert sanitize_key("Snake") == "snake"


def test_json_file_store_round_trip(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "state" / "local_storage.json")
    assert store.get("missing") is None

    store.set("a", "1")
    store.set("b", "two")

    reopened = JsonFileStore(tmp_path / "state" / "local_storage.json")
    assert reopened.get("a") == "1"
    assert reopened.get("b") == "two"


def test_json_file_store_treats_corrupt_file_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "local_storage.json"
    path.write_text("{oops", encoding="utf-8")

    assert JsonFileStore(path).get("projectRatings") is None


def test_rating_average_and_count() -> None:
    book = RatingBook(InMemoryStore())
    for stars in (5, 3, 4):
        book.submit("Snake", stars)

    summary = book.summary("Snake")
    assert summary.average == 4.0
    assert summary.count == 3


def test_unrated_project_summary_is_zero() -> None:
    summary = RatingBook(InMemoryStore()).summary("Nobody rated me")

    assert summary.average == 0.0
    assert summary.count == 0


@pytest.mark.parametrize("bad", [0, 6, -1, True, 4.5, "5"])
def test_rating_must_be_integer_between_1_and_5(bad) -> None:
    book = RatingBook(InMemoryStore())

    with pytest.raises(ValueError):
        book.submit("Snake", bad)
    assert book.summary("Snake").count == 0


def test_ratings_are_rewritten_wholesale_under_sanitized_keys(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "local_storage.json")
    book = RatingBook(store)
    book.submit("Tic Tac-Toe!", 5, "  great  ", timestamp=1_700_000_000_000)

    blob = json.loads(store.get("projectRatings"))
    assert blob == {"tic_tac_toe_": [{"rating": 5, "review": "great", "timestamp": 1_700_000_000_000}]}

    # A fresh book sees the persisted entries.
    assert RatingBook(store).summary("tic tac toe?").count == 1


def test_rating_book_ignores_corrupt_blob() -> None:
    store = InMemoryStore({"projectRatings": "not json"})

    book = RatingBook(store)
    assert book.summary("Snake").count == 0
    book.submit("Snake", 2)
    assert book.summary("Snake").average == 2.0


def test_bookmark_toggle_round_trip() -> None:
    bookmarks = BookmarkStore(InMemoryStore())
    project = Project(title="Snake", link="./projects/snake/index.html", category="game", description="Arcade")

    assert bookmarks.is_bookmarked("Snake") is False
    assert bookmarks.toggle(project) is True
    assert bookmarks.is_bookmarked("Snake") is True

    rows = bookmarks.list()
    assert len(rows) == 1
    assert rows[0]["title"] == "Snake"
    assert rows[0]["category"] == "game"
    assert "bookmarkedAt" in rows[0]

    assert bookmarks.toggle(project) is False
    assert bookmarks.is_bookmarked("Snake") is False
    assert bookmarks.list() == []


def test_stored_ratings_outside_range_are_ignored() -> None:
    blob = json.dumps(
        {"snake": [{"rating": 9, "review": "edited", "timestamp": 1}, {"rating": 4, "review": "", "timestamp": 2}]}
    )
    book = RatingBook(InMemoryStore({"projectRatings": blob}))

    assert [e.rating for e in book.entries("Snake")] == [4]
    assert book.summary("Snake").average == 4.0
