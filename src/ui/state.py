"""UI state management for Streamlit app.

Owns the per-session ShowcaseApp instance; nothing here is persisted beyond
what the ShowcaseApp's own stores write.
"""

from __future__ import annotations

from typing import Any, Callable

import streamlit as st

from src.catalog import CatalogLoadError
from src.showcase import LOAD_ERROR_MESSAGE, ShowcaseApp, create_showcase

SHOWCASE_KEY = "showcase_app"
ERROR_KEY = "showcase_error"


def get_ui_state() -> dict[str, Any]:
    """Return the centralized UI state dict, initializing if needed."""
    if "ui_state" not in st.session_state:
        st.session_state["ui_state"] = {"contributors": {}}
    return st.session_state["ui_state"]


def get_showcase(factory: Callable[[], ShowcaseApp] = create_showcase) -> tuple[ShowcaseApp | None, str | None]:
    """Return (app, error_message), building the app once per session."""
    if SHOWCASE_KEY in st.session_state:
        return st.session_state[SHOWCASE_KEY], None
    if ERROR_KEY in st.session_state:
        return None, st.session_state[ERROR_KEY]

    try:
        app = factory()
    except CatalogLoadError:
        st.session_state[ERROR_KEY] = LOAD_ERROR_MESSAGE
        return None, LOAD_ERROR_MESSAGE

    st.session_state[SHOWCASE_KEY] = app
    return app, None

