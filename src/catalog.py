"""Project-store loading.

Two sources are tried in order:

1. ``project-manifest.json``: an index of per-project ``project.json`` files.
   The per-project documents are fetched concurrently and joined; individual
   failures are logged and skipped.
2. ``projects.json``: the legacy flat catalog, used only when the manifest is
   unreadable or yields no projects.

Both locations may be local paths or http(s) URLs. The loaded records are
deduplicated by case-normalized title (first occurrence wins) and records
without ``title``/``link`` are dropped.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Literal
from urllib.parse import urljoin, urlparse

import requests

from src.config import HTTP_TIMEOUT
from src.core.contracts import ManifestEntry, Project

logger = logging.getLogger(__name__)

LOAD_ERRORS = (requests.RequestException, OSError, ValueError, KeyError, TypeError)


class CatalogLoadError(RuntimeError):
    """Raised when neither the manifest nor the legacy catalog yields projects."""


@dataclass(frozen=True)
class CatalogLoad:
    projects: list[Project]
    source: Literal["manifest", "legacy"]


def _is_url(location: str) -> bool:
    return urlparse(str(location)).scheme in {"http", "https"}


def read_json_location(location: str | Path, *, timeout: float = HTTP_TIMEOUT) -> Any:
    """Read a JSON document from a local path or an http(s) URL."""
    if _is_url(str(location)):
        resp = requests.get(str(location), timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    return json.loads(Path(location).read_text(encoding="utf-8"))


def resolve_entry_location(manifest_location: str | Path, entry_path: str) -> str:
    """Resolve a manifest entry path relative to the manifest's own location."""
    if _is_url(entry_path):
        return entry_path
    if _is_url(str(manifest_location)):
        return urljoin(str(manifest_location), entry_path)
    candidate = Path(entry_path)
    if candidate.is_absolute():
        return str(candidate)
    return str(Path(manifest_location).parent / candidate)


def dedupe_projects(raw: Iterable[Any]) -> list[Project]:
    seen: set[str] = set()
    out: list[Project] = []
    for record in raw:
        if not isinstance(record, dict):
            continue
        try:
            project = Project.from_dict(record)
        except ValueError:
            continue
        if project.key in seen:
            continue
        seen.add(project.key)
        out.append(project)
    return out


async def _fetch_entry(
    manifest_location: str | Path,
    entry: ManifestEntry,
    timeout: float,
) -> dict[str, Any] | None:
    location = resolve_entry_location(manifest_location, entry.path)
    try:
        data = await asyncio.to_thread(read_json_location, location, timeout=timeout)
    except LOAD_ERRORS as exc:
        logger.warning("Failed to load %s/project.json: %s", entry.folder or entry.path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Skipping %s: project.json is not an object", entry.folder or entry.path)
        return None
    # Manifest link wins over whatever the project file declares.
    return {**data, "link": entry.link}


async def fetch_from_manifest(
    manifest_location: str | Path,
    *,
    timeout: float = HTTP_TIMEOUT,
) -> list[dict[str, Any]] | None:
    """Return raw project dicts listed by the manifest, or None if it is unusable."""
    try:
        manifest = await asyncio.to_thread(read_json_location, manifest_location, timeout=timeout)
        entries = [ManifestEntry.from_dict(e) for e in manifest["projects"]]
    except LOAD_ERRORS as exc:
        logger.warning("Manifest load failed (%s): %s", manifest_location, exc)
        return None

    logger.info("Loading %s projects from manifest...", manifest.get("count", len(entries)))
    results = await asyncio.gather(*(_fetch_entry(manifest_location, e, timeout) for e in entries))
    return [r for r in results if r is not None]


def fetch_from_legacy(location: str | Path, *, timeout: float = HTTP_TIMEOUT) -> list[Any]:
    try:
        data = read_json_location(location, timeout=timeout)
    except LOAD_ERRORS as exc:
        logger.error("Legacy catalog failed (%s): %s", location, exc)
        return []
    if not isinstance(data, list):
        logger.error("Legacy catalog %s is not a JSON list", location)
        return []
    return data


async def load_catalog_async(
    manifest_location: str | Path,
    legacy_location: str | Path,
    *,
    timeout: float = HTTP_TIMEOUT,
) -> CatalogLoad:
    raw = await fetch_from_manifest(manifest_location, timeout=timeout)
    source: Literal["manifest", "legacy"] = "manifest"

    if not raw:
        logger.warning("Manifest not found or empty, trying legacy catalog...")
        raw = await asyncio.to_thread(fetch_from_legacy, legacy_location, timeout=timeout)
        source = "legacy"

    projects = dedupe_projects(raw)
    if not projects:
        logger.error("Failed to load projects from %s and %s", manifest_location, legacy_location)
        raise CatalogLoadError("No projects could be loaded from the manifest or the legacy catalog")

    logger.info("Loaded %d projects from %s.", len(projects), source)
    return CatalogLoad(projects=projects, source=source)


def load_catalog(
    manifest_location: str | Path,
    legacy_location: str | Path,
    *,
    timeout: float = HTTP_TIMEOUT,
) -> CatalogLoad:
    """Synchronous wrapper around :func:`load_catalog_async` for UI/CLI callers."""
    return asyncio.run(load_catalog_async(manifest_location, legacy_location, timeout=timeout))


def build_manifest(projects_dir: str | Path) -> dict[str, Any]:
    """Scan ``projects/<folder>/project.json`` files and return a manifest document."""
    root = Path(projects_dir)
    entries: list[ManifestEntry] = []
    if root.is_dir():
        for folder in sorted(p for p in root.iterdir() if p.is_dir()):
            if not (folder / "project.json").is_file():
                continue
            entries.append(
                ManifestEntry(
                    path=f"./projects/{folder.name}/project.json",
                    link=f"./projects/{folder.name}/index.html",
                    folder=folder.name,
                )
            )
    return {"count": len(entries), "projects": [e.to_dict() for e in entries]}
