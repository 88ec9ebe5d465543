from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def sanitize_key(title: str) -> str:
    """Return the persistence key for a project title.

    Every character outside ``[A-Za-z0-9]`` becomes ``_`` and the result is
    lower-cased, so ``"Tic Tac-Toe!"`` maps to ``"tic_tac_toe_"``.
    """
    return _NON_ALNUM_RE.sub("_", str(title or "")).lower()


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Project:
    title: str
    link: str
    category: str = ""
    description: str | None = None
    tech: tuple[str, ...] = ()
    icon: str | None = None
    cover_style: str | None = None
    cover_class: str | None = None

    @property
    def key(self) -> str:
        return self.title.lower()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "title": self.title,
            "link": self.link,
            "category": self.category,
            "description": self.description,
            "tech": list(self.tech),
        }
        if self.icon is not None:
            out["icon"] = self.icon
        if self.cover_style is not None:
            out["coverStyle"] = self.cover_style
        if self.cover_class is not None:
            out["coverClass"] = self.cover_class
        return out

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Project":
        """Build a Project from a catalog JSON object.

        Raises ValueError when ``title`` or ``link`` is missing or empty.
        """
        title = d.get("title")
        link = d.get("link")
        if not title or not link:
            raise ValueError("project record requires 'title' and 'link'")

        raw_tech = d.get("tech")
        tech = tuple(str(t) for t in raw_tech) if isinstance(raw_tech, list) else ()

        return cls(
            title=str(title),
            link=str(link),
            category=str(d.get("category") or ""),
            description=_opt_str(d.get("description")),
            tech=tech,
            icon=_opt_str(d.get("icon")),
            cover_style=_opt_str(d.get("coverStyle")),
            cover_class=_opt_str(d.get("coverClass")),
        )


@dataclass(frozen=True)
class ManifestEntry:
    path: str
    link: str
    folder: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ManifestEntry":
        return cls(path=str(d["path"]), link=str(d["link"]), folder=str(d.get("folder") or ""))


@dataclass(frozen=True)
class RatingEntry:
    rating: int
    review: str = ""
    timestamp: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "RatingEntry":
        return cls(
            rating=int(d["rating"]),
            review=str(d.get("review") or ""),
            timestamp=int(d.get("timestamp") or 0),
        )


@dataclass(frozen=True)
class RatingSummary:
    average: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class Contributor:
    login: str
    avatar_url: str
    html_url: str
    contributions: int = 0

    @property
    def is_bot(self) -> bool:
        return "[bot]" in self.login

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Contributor":
        return cls(
            login=str(d.get("login") or ""),
            avatar_url=str(d.get("avatar_url") or ""),
            html_url=str(d.get("html_url") or ""),
            contributions=int(d.get("contributions") or 0),
        )


@dataclass(frozen=True)
class ProjectCard:
    """Plain-data view model for one rendered card or list row."""

    project: Project
    rating: RatingSummary
    stars: tuple[str, ...]
    rating_label: str
    category_label: str
    bookmarked: bool
    source_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": self.project.to_dict(),
            "rating": asdict(self.rating),
            "stars": list(self.stars),
            "rating_label": self.rating_label,
            "category_label": self.category_label,
            "bookmarked": self.bookmarked,
            "source_url": self.source_url,
        }


@dataclass(frozen=True)
class PageView:
    items: list[ProjectCard]
    page: int
    total_pages: int
    total_items: int
    sort_mode: str
    view_mode: str
    pagination: list[int | str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [card.to_dict() for card in self.items],
            "page": self.page,
            "total_pages": self.total_pages,
            "total_items": self.total_items,
            "sort_mode": self.sort_mode,
            "view_mode": self.view_mode,
            "pagination": list(self.pagination),
        }
