"""I/O helpers for reading and writing structured data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def save_json(path: Path, data: Any, *, indent: int = 2) -> None:
    """Write ``data`` to ``path`` as JSON with UTF-8 encoding."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        json.dump(data, stream, indent=indent, ensure_ascii=False)
        stream.write("\n")


def load_json(path: Path) -> Any:
    """Read a JSON document from ``path``."""
    with path.open("r", encoding="utf-8") as stream:
        return json.load(stream)
