"""Formatting helpers for UI display."""

from __future__ import annotations

from datetime import datetime, timezone

import pandas as pd

from src.core.contracts import Contributor, ProjectCard

_STAR_GLYPHS = {"full": "★", "half": "⯪", "empty": "☆"}


def stars_text(stars: tuple[str, ...] | list[str]) -> str:
    return "".join(_STAR_GLYPHS.get(s, "☆") for s in stars)


def tech_badges(tech: tuple[str, ...] | list[str]) -> str:
    """Inline-code badges for a tech list, e.g. "`HTML` `CSS`"."""
    return " ".join(f"`{t.replace('`', '')}`" for t in tech if t)


def card_caption(card: ProjectCard) -> str:
    return f"{card.category_label} · {stars_text(card.stars)} {card.rating_label}".strip()


def format_timestamp_ms(ts: int | None) -> str | None:
    """Epoch milliseconds -> ISO timestamp truncated to seconds (UTC)."""
    if not ts:
        return None
    try:
        return datetime.fromtimestamp(int(ts) / 1000, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return None


def contributors_frame(contributors: list[Contributor]) -> pd.DataFrame:
    """Contributors as a table, most contributions first."""
    df = pd.DataFrame(
        [c.to_dict() for c in contributors],
        columns=["login", "avatar_url", "html_url", "contributions"],
    )
    if df.empty:
        return df
    return df.sort_values("contributions", ascending=False, kind="stable").reset_index(drop=True)


def skills_frame(skills: list[tuple[str, float]]) -> pd.DataFrame:
    return pd.DataFrame(skills, columns=["skill", "level"])
