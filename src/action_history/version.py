from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Optional

DISTRIBUTION = "action-history"

_VERSION_LINE = re.compile(r'(?m)^\s*version\s*=\s*"([^"]+)"')


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the installed version, or the source tree's when running uninstalled."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        pass
    return _source_tree_version(Path(__file__).resolve()) or "Unknown"


def _source_tree_version(start: Path) -> Optional[str]:
    for ancestor in start.parents:
        pyproject = ancestor / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            match = _VERSION_LINE.search(pyproject.read_text(encoding="utf-8"))
        except OSError:
            return None
        return match.group(1) if match else None
    return None
