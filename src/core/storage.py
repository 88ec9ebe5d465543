"""String-keyed blob persistence used for ratings and bookmarks.

Mirrors browser local storage: values are opaque strings, and every ``set``
rewrites the whole backing map. No locking; a single UI session owns the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)


class JsonFileStore:
    """Key-value map persisted as one JSON object file.

    A missing, empty or corrupt file reads as an empty map.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            content = self.path.read_text(encoding="utf-8").strip()
            if not content:
                return {}
            data = json.loads(content)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def read_json_blob(store: KeyValueStore, key: str, default):  # noqa: ANN001
    """Decode a JSON value stored under ``key``; ``default`` when absent or invalid."""
    raw = store.get(key)
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Discarding corrupt %r blob", key)
        return default


def write_json_blob(store: KeyValueStore, key: str, obj) -> None:  # noqa: ANN001
    store.set(key, json.dumps(obj, ensure_ascii=False))
