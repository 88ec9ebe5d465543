from __future__ import annotations

import unicodedata
from typing import Callable, Sequence

from src.core.contracts import Project

SORT_MODES: dict[str, str] = {
    "default": "Default",
    "az": "A-Z",
    "za": "Z-A",
    "newest": "Newest first",
    "rating-high": "Highest rated",
    "rating-low": "Lowest rated",
}


def _title_key(project: Project) -> tuple[str, str]:
    # Accents sort with their base letter, as a locale collation would.
    decomposed = unicodedata.normalize("NFKD", project.title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), project.title)


def sort_projects(
    projects: Sequence[Project],
    mode: str | None,
    rating_of: Callable[[Project], float] | None = None,
) -> list[Project]:
    """Return a new list ordered by ``mode``.

    Unknown modes keep store order. Rating modes need ``rating_of``; projects
    with equal ratings keep their incoming relative order.
    """
    items = list(projects)
    mode = mode or "default"

    if mode == "az":
        return sorted(items, key=_title_key)
    if mode == "za":
        return sorted(items, key=_title_key, reverse=True)
    if mode == "newest":
        return items[::-1]
    if mode in {"rating-high", "rating-low"}:
        if rating_of is None:
            raise ValueError(f"sort mode {mode!r} requires a rating lookup")
        return sorted(items, key=rating_of, reverse=(mode == "rating-high"))
    return items
