"""Thin UI layer.

This package contains the Streamlit presentation adapter. Pages:
- collect inputs (search, category, sort, page, ratings, bookmarks)
- hand them to the ShowcaseApp held in session state
- render the plain PageView data it returns

Business logic should live in src/core, src/showcase.py and the script modules.
"""
