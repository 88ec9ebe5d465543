"""Markdown to HTML for the live previewer (line breaks kept, GFM-style blocks)."""

from __future__ import annotations

import markdown

EXTENSIONS = ["nl2br", "fenced_code", "tables", "sane_lists"]


def render_markdown(text: str | None) -> str:
    if not text:
        return ""
    return markdown.markdown(text, extensions=EXTENSIONS, output_format="html")
