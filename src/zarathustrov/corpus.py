"""Corpus loading and tree snapshots."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import CorpusConfig
from .data import load_sample_corpus
from .errors import CorpusError, SnapshotError
from .logging import get_logger
from .model import Tree, build_tree
from .utils import load_json, save_json

LOGGER = get_logger(__name__)


def read_corpus(path: Path) -> bytes:
    """Return the raw bytes of the corpus at ``path``."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise CorpusError(f"Unable to read corpus {path}: {exc}") from exc


def save_snapshot(tree: Tree, path: Path) -> None:
    save_json(Path(path), tree.to_dict())
    LOGGER.info("Wrote tree snapshot to %s", path)


def load_snapshot(path: Path) -> Tree:
    """Read a snapshot written by :func:`save_snapshot`."""
    try:
        payload = load_json(Path(path))
    except (OSError, ValueError) as exc:
        raise SnapshotError(f"Unable to read snapshot {path}: {exc}") from exc
    return Tree.from_dict(payload)


def load_tree(config: CorpusConfig, *, snapshot: Optional[Path] = None) -> Tree:
    """Build the tree described by ``config``.

    Without a corpus path the bundled sample corpus is used. The snapshot is
    written when either ``snapshot`` or ``config.snapshot`` names a file.
    """

    if config.path is None:
        LOGGER.info("No corpus configured; using the bundled sample corpus")
        text = load_sample_corpus().encode("utf-8")
    else:
        text = read_corpus(config.path)
    tree = build_tree(text, config.start, config.end)
    target = snapshot or config.snapshot
    if target is not None:
        save_snapshot(tree, target)
    return tree


__all__ = ["load_snapshot", "load_tree", "read_corpus", "save_snapshot"]
