from __future__ import annotations

from src.markdown_preview import render_markdown


def test_empty_input_renders_nothing() -> None:
    assert render_markdown("") == ""
    assert render_markdown(None) == ""


def test_headings_and_emphasis() -> None:
    html = render_markdown("# Title\n\nSome **bold** and *italic* text.")

    assert "<h1>Title</h1>" in html
    assert "<strong>bold</strong>" in html
    assert "<em>italic</em>" in html


def test_single_newlines_become_line_breaks() -> None:
    assert "<br" in render_markdown("line one\nline two")


def test_fenced_code_and_tables() -> None:
    html = render_markdown("```\nprint('hi')\n```\n\n| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert "<pre><code>" in html
    assert "<table>" in html
    assert "<td>1</td>" in html
