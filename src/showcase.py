"""Application state for the project showcase.

``ShowcaseApp`` owns the filter/sort/page pipeline for one loaded store and
produces plain :class:`~src.core.contracts.PageView` data. It is constructed
explicitly by whichever entry point renders it (Streamlit session, FastAPI
app state, tests) with its persistence collaborators injected.
"""

from __future__ import annotations

import logging
import random
import re
from typing import Sequence
from urllib.parse import quote

from src.catalog import load_catalog
from src.config import PathsConfig, ShowcaseConfig
from src.core.bookmarks import BookmarkStore
from src.core.contracts import PageView, Project, ProjectCard, RatingEntry, RatingSummary
from src.core.ratings import RatingBook
from src.core.sorting import SORT_MODES, sort_projects
from src.core.storage import JsonFileStore, KeyValueStore
from src.core.visibility import (
    ALL_CATEGORIES,
    VisibilityEngine,
    clamp_page,
    paginate,
    pagination_window,
    total_pages,
)

logger = logging.getLogger(__name__)

VIEW_MODES = ("card", "list")
LOAD_ERROR_MESSAGE = "Failed to load projects. Please refresh."

_PROJECT_FOLDER_RE = re.compile(r"\./projects/([^/]+)/")


def star_icons(average: float) -> tuple[str, ...]:
    """Five star states for ``average``: "full", "half" or "empty"."""
    out = []
    for i in range(1, 6):
        if i <= average:
            out.append("full")
        elif i - 0.5 <= average:
            out.append("half")
        else:
            out.append("empty")
    return tuple(out)


def rating_label(summary: RatingSummary) -> str:
    if summary.count <= 0 or summary.average <= 0:
        return "No ratings"
    return f"{summary.average:.1f} ({summary.count})"


def capitalize(text: str | None) -> str:
    return text[:1].upper() + text[1:] if text else ""


def source_code_url(link: str | None, repo_url: str) -> str:
    """Map ``./projects/<folder>/...`` links to the folder on GitHub."""
    if not link:
        return "#"
    match = _PROJECT_FOLDER_RE.search(link)
    if match:
        return f"{repo_url.rstrip('/')}/tree/main/projects/{quote(match.group(1), safe='')}"
    return link


class ShowcaseApp:
    def __init__(
        self,
        projects: Sequence[Project],
        *,
        ratings: RatingBook,
        bookmarks: BookmarkStore,
        config: ShowcaseConfig | None = None,
    ) -> None:
        self.config = config or ShowcaseConfig()
        self.projects: tuple[Project, ...] = tuple(projects)
        self.engine = VisibilityEngine(self.projects, items_per_page=self.config.items_per_page)
        self.ratings = ratings
        self.bookmarks = bookmarks
        self.sort_mode = self.config.default_sort if self.config.default_sort in SORT_MODES else "default"
        self.view_mode = self.config.default_view if self.config.default_view in VIEW_MODES else "card"
        self.current_page = 1

    # --- user input -----------------------------------------------------

    def set_search_query(self, query: str | None) -> None:
        self.engine.set_search_query(query)
        self.current_page = 1

    def set_category(self, category: str | None) -> None:
        self.engine.set_category(category)
        self.current_page = 1

    def set_sort_mode(self, mode: str | None) -> None:
        self.sort_mode = mode if mode in SORT_MODES else "default"
        self.current_page = 1

    def set_view_mode(self, mode: str) -> None:
        if mode not in VIEW_MODES:
            raise ValueError(f"view mode must be one of {VIEW_MODES}, got {mode!r}")
        self.view_mode = mode

    def go_to_page(self, page: int) -> None:
        n_pages = total_pages(len(self.engine.get_visible_projects()), self.engine.items_per_page)
        self.current_page = clamp_page(page, n_pages)

    # --- derived data ---------------------------------------------------

    def rating_of(self, title: str) -> RatingSummary:
        return self.ratings.summary(title)

    def categories(self) -> list[str]:
        return [ALL_CATEGORIES] + sorted({p.category for p in self.projects if p.category})

    def project_count_label(self) -> str:
        return f"{len(self.projects)}+"

    def reviews(self, title: str) -> list[RatingEntry]:
        """Ratings for ``title``, newest first."""
        return sorted(self.ratings.entries(title), key=lambda e: e.timestamp, reverse=True)

    def random_project(self, rng: random.Random | None = None) -> Project | None:
        if not self.projects:
            return None
        return (rng or random).choice(self.projects)

    def card_for(self, project: Project) -> ProjectCard:
        summary = self.rating_of(project.title)
        return ProjectCard(
            project=project,
            rating=summary,
            stars=star_icons(summary.average),
            rating_label=rating_label(summary),
            category_label=capitalize(project.category),
            bookmarked=self.bookmarks.is_bookmarked(project.title),
            source_url=source_code_url(project.link, self.config.repo_url),
        )

    def render(self) -> PageView:
        """Filter, sort, clamp the page and slice it into card view models."""
        filtered = self.engine.get_visible_projects()
        ordered = sort_projects(filtered, self.sort_mode, lambda p: self.ratings.average(p.title))

        per_page = self.engine.items_per_page
        n_pages = total_pages(len(ordered), per_page)
        self.current_page = clamp_page(self.current_page, n_pages)
        self.engine.set_page(self.current_page)

        page_items = paginate(ordered, self.current_page, per_page)
        return PageView(
            items=[self.card_for(p) for p in page_items],
            page=self.current_page,
            total_pages=n_pages,
            total_items=len(ordered),
            sort_mode=self.sort_mode,
            view_mode=self.view_mode,
            pagination=pagination_window(self.current_page, n_pages),
        )

    # --- persistence-backed actions -------------------------------------

    def submit_rating(self, title: str, rating: int, review: str = "") -> RatingEntry:
        entry = self.ratings.submit(title, rating, review)
        logger.info("Rated %r %d/5", title, rating)
        return entry

    def toggle_bookmark(self, project: Project) -> bool:
        return self.bookmarks.toggle(project)


def create_showcase(
    *,
    paths: PathsConfig | None = None,
    config: ShowcaseConfig | None = None,
    store: KeyValueStore | None = None,
) -> ShowcaseApp:
    """Load the catalog and wire a ShowcaseApp with file-backed persistence.

    Raises :class:`~src.catalog.CatalogLoadError` when no projects load.
    """
    paths = paths or PathsConfig()
    config = config or ShowcaseConfig()
    store = store if store is not None else JsonFileStore(paths.state_file)

    loaded = load_catalog(paths.manifest, paths.legacy_catalog, timeout=config.http_timeout)
    return ShowcaseApp(
        loaded.projects,
        ratings=RatingBook(store, key=config.ratings_key),
        bookmarks=BookmarkStore(store, key=config.bookmarks_key),
        config=config,
    )
