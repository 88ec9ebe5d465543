from __future__ import annotations

import time

from src.core.contracts import RatingEntry, RatingSummary, sanitize_key
from src.core.storage import KeyValueStore, read_json_blob, write_json_blob

MIN_RATING = 1
MAX_RATING = 5


def _now_ms() -> int:
    return int(time.time() * 1000)


class RatingBook:
    """Append-only star ratings keyed by sanitized project title.

    The whole map is read once at construction and rewritten on every
    submission, as local storage would be.
    """

    def __init__(self, store: KeyValueStore, *, key: str = "projectRatings") -> None:
        self._store = store
        self._key = key
        self._ratings: dict[str, list[RatingEntry]] = self._load()

    def _load(self) -> dict[str, list[RatingEntry]]:
        raw = read_json_blob(self._store, self._key, {})
        if not isinstance(raw, dict):
            return {}
        out: dict[str, list[RatingEntry]] = {}
        for key, rows in raw.items():
            if not isinstance(rows, list):
                continue
            entries = []
            for row in rows:
                try:
                    entry = RatingEntry.from_dict(row)
                except (KeyError, TypeError, ValueError):
                    continue
                if MIN_RATING <= entry.rating <= MAX_RATING:
                    entries.append(entry)
            out[str(key)] = entries
        return out

    def _save(self) -> None:
        payload = {k: [e.to_dict() for e in v] for k, v in self._ratings.items()}
        write_json_blob(self._store, self._key, payload)

    def submit(
        self,
        title: str,
        rating: int,
        review: str = "",
        *,
        timestamp: int | None = None,
    ) -> RatingEntry:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValueError("rating must be an integer")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"rating must be between {MIN_RATING} and {MAX_RATING}")

        entry = RatingEntry(
            rating=rating,
            review=(review or "").strip(),
            timestamp=_now_ms() if timestamp is None else int(timestamp),
        )
        self._ratings.setdefault(sanitize_key(title), []).append(entry)
        self._save()
        return entry

    def entries(self, title: str) -> list[RatingEntry]:
        return list(self._ratings.get(sanitize_key(title), []))

    def summary(self, title: str) -> RatingSummary:
        rows = self._ratings.get(sanitize_key(title), [])
        if not rows:
            return RatingSummary()
        return RatingSummary(
            average=sum(r.rating for r in rows) / len(rows),
            count=len(rows),
        )

    def average(self, title: str) -> float:
        return self.summary(title).average
