"""Streamlit UI entrypoint.

This is the main entry point for the Streamlit UI. It sets up the application
and delegates to page modules for rendering each tab.

Run with:

    streamlit run src/ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure repo root is on sys.path for imports.
repo_root = Path(__file__).resolve().parents[2]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

import altair as alt
import streamlit as st

from src.config import SKILLS_FILE
from src.contributors import load_contributors
from src.core.contracts import sanitize_key
from src.core.sorting import SORT_MODES
from src.github_client import GitHubClient
from src.markdown_preview import render_markdown
from src.recommend import fetch_and_recommend
from src.showcase import VIEW_MODES
from src.skills import growth_frame, load_profile, profile_stats, top_skills
from src.ui.formatting import (
    card_caption,
    contributors_frame,
    format_timestamp_ms,
    skills_frame,
    stars_text,
    tech_badges,
)
from src.ui.state import get_showcase, get_ui_state

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="OpenPlayground", layout="wide")

st.title("OpenPlayground")
st.markdown("Community-built projects you can open, rate and bookmark.")

app, load_error = get_showcase()

tab_projects, tab_contributors, tab_dashboard, tab_markdown = st.tabs(
    [
        "Projects",
        "Contributors",
        "Skill Dashboard",
        "Markdown Editor",
    ]
)

with tab_projects:
    from src.ui.pages import projects_page

    projects_page.render_projects_tab(
        st=st,
        app=app,
        error=load_error,
        SORT_MODES=SORT_MODES,
        VIEW_MODES=VIEW_MODES,
        sanitize_key=sanitize_key,
        stars_text=stars_text,
        tech_badges=tech_badges,
        card_caption=card_caption,
        format_timestamp_ms=format_timestamp_ms,
    )

with tab_contributors:
    from src.ui.pages import contributors_page

    contributors_page.render_contributors_tab(
        st=st,
        get_ui_state=get_ui_state,
        load_contributors=load_contributors,
        make_client=GitHubClient,
        contributors_frame=contributors_frame,
    )

with tab_dashboard:
    from src.ui.pages import dashboard_page

    dashboard_page.render_dashboard_tab(
        st=st,
        alt=alt,
        SKILLS_FILE=SKILLS_FILE,
        load_profile=load_profile,
        top_skills=top_skills,
        profile_stats=profile_stats,
        growth_frame=growth_frame,
        skills_frame=skills_frame,
        fetch_and_recommend=fetch_and_recommend,
        make_client=GitHubClient,
    )

with tab_markdown:
    from src.ui.pages import markdown_page

    markdown_page.render_markdown_tab(st=st, render_markdown=render_markdown)
