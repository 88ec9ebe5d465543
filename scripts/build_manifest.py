"""Regenerate ``project-manifest.json`` from ``projects/<folder>/project.json``.

Usage (from repo root):

    python -m scripts.build_manifest --projects-dir projects \
        --output project-manifest.json
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from src import config as config_mod
from src.catalog import build_manifest


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Build the project manifest from per-project JSON files.")
    p.add_argument("--projects-dir", default=config_mod.PROJECTS_DIR, help="Directory holding one folder per project.")
    p.add_argument("--output", default=config_mod.MANIFEST_PATH, help="Where to write the manifest JSON.")
    args = p.parse_args(argv)

    manifest = build_manifest(args.projects_dir)
    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Wrote {manifest['count']} projects to {out}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
