"""Core (pure) library layer.

This package is intended to be UI-agnostic and safe to import from:
- the Streamlit adapter
- the FastAPI surface
- CLI entrypoints
- tests

It should not import Streamlit or perform network I/O at import time.
"""
