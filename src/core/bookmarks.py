from __future__ import annotations

import time
from typing import Any

from src.core.contracts import Project, sanitize_key
from src.core.storage import KeyValueStore, read_json_blob, write_json_blob


class BookmarkStore:
    """Client-local bookmarks, one entry per sanitized title."""

    def __init__(self, store: KeyValueStore, *, key: str = "bookmarks") -> None:
        self._store = store
        self._key = key

    def _load(self) -> list[dict[str, Any]]:
        raw = read_json_blob(self._store, self._key, [])
        if not isinstance(raw, list):
            return []
        return [row for row in raw if isinstance(row, dict) and row.get("title")]

    def list(self) -> list[dict[str, Any]]:
        return self._load()

    def is_bookmarked(self, title: str) -> bool:
        key = sanitize_key(title)
        return any(sanitize_key(row["title"]) == key for row in self._load())

    def toggle(self, project: Project) -> bool:
        """Add or remove ``project``; returns the new bookmarked state."""
        rows = self._load()
        key = sanitize_key(project.title)
        kept = [row for row in rows if sanitize_key(row["title"]) != key]

        if len(kept) != len(rows):
            write_json_blob(self._store, self._key, kept)
            return False

        kept.append(
            {
                "title": project.title,
                "link": project.link,
                "category": project.category,
                "description": project.description or "",
                "bookmarkedAt": int(time.time() * 1000),
            }
        )
        write_json_blob(self._store, self._key, kept)
        return True
