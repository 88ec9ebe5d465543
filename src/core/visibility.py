"""Filtering and paging over the in-memory project store.

The engine only filters: it keeps the store order and leaves sorting to the
caller (see :mod:`src.core.sorting`). Paging helpers are plain functions so
the API, the Streamlit adapter and tests can share them.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from src.core.contracts import Project

T = TypeVar("T")

ALL_CATEGORIES = "all"


def _matches_category(project: Project, category: str | None) -> bool:
    if not category or category == ALL_CATEGORIES:
        return True
    return project.category == category


def _matches_query(project: Project, needle: str) -> bool:
    if not needle:
        return True
    if needle in project.title.lower():
        return True
    if project.description and needle in project.description.lower():
        return True
    return any(needle in t.lower() for t in project.tech)


class VisibilityEngine:
    """Search/category filter plus the page cursor for one loaded store."""

    def __init__(self, projects: Sequence[Project], *, items_per_page: int = 12) -> None:
        if int(items_per_page) <= 0:
            raise ValueError("items_per_page must be positive")
        self._projects: tuple[Project, ...] = tuple(projects)
        self.items_per_page = int(items_per_page)
        self.search_query = ""
        self.category = ALL_CATEGORIES
        self.current_page = 1

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    def set_search_query(self, query: str | None) -> None:
        self.search_query = query or ""

    def set_category(self, category: str | None) -> None:
        self.category = category or ALL_CATEGORIES

    def set_page(self, page: int) -> None:
        # Not clamped here; callers clamp against total_pages().
        self.current_page = int(page)

    def get_visible_projects(self) -> list[Project]:
        needle = self.search_query.lower()
        return [
            p
            for p in self._projects
            if _matches_category(p, self.category) and _matches_query(p, needle)
        ]

    def total_pages(self) -> int:
        return total_pages(len(self.get_visible_projects()), self.items_per_page)


def total_pages(n_items: int, per_page: int) -> int:
    """Return ceil(n_items / per_page), 0 for an empty sequence."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    if n_items <= 0:
        return 0
    return math.ceil(n_items / per_page)


def clamp_page(page: int, n_pages: int) -> int:
    """Clamp a 1-based page number into [1, max(n_pages, 1)]."""
    return max(1, min(int(page), max(int(n_pages), 1)))


def paginate(items: Sequence[T], page: int, per_page: int) -> list[T]:
    """Return the 1-based ``page`` slice ``[(page-1)*per_page, min(N, page*per_page))``."""
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    start = (int(page) - 1) * per_page
    if start < 0:
        return []
    return list(items[start : start + per_page])


def pagination_window(current: int, n_pages: int) -> list[int | str]:
    """Page buttons to show: first, last, current +/- 2, with ``"..."`` gaps."""
    if n_pages <= 1:
        return []
    out: list[int | str] = []
    for i in range(1, n_pages + 1):
        if i == 1 or i == n_pages or current - 2 <= i <= current + 2:
            out.append(i)
        elif i == current - 3 or i == current + 3:
            out.append("...")
    return out
