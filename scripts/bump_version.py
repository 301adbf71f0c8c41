#!/usr/bin/env python3
"""Set the integration version in manifest.json and pyproject.toml."""

from __future__ import annotations

import argparse
import json
import re
from pathlib import Path

MANIFEST = Path("custom_components/workout_tracker/manifest.json")
PYPROJECT = Path("pyproject.toml")
_PYPROJECT_VERSION_RE = re.compile(r'^version = "[^"]*"$', re.MULTILINE)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--version", required=True, help="New version, e.g. 0.1.1")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    version = str(args.version).strip()
    if not re.fullmatch(r"\d+\.\d+\.\d+", version):
        raise SystemExit("Invalid --version (expected MAJOR.MINOR.PATCH)")

    manifest = json.loads(MANIFEST.read_text(encoding="utf-8"))
    manifest["version"] = version
    MANIFEST.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    raw = PYPROJECT.read_text(encoding="utf-8")
    updated, count = _PYPROJECT_VERSION_RE.subn(f'version = "{version}"', raw, count=1)
    if count != 1:
        raise SystemExit("No version line found in pyproject.toml")
    PYPROJECT.write_text(updated, encoding="utf-8")

    print("Updated version to", version)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
