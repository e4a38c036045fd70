from __future__ import annotations

import json
from pathlib import Path

import pytest

from zarathustrov.config import CorpusConfig
from zarathustrov.corpus import load_snapshot, load_tree, read_corpus
from zarathustrov.errors import CorpusError, SnapshotError


def test_load_tree_uses_window_and_writes_snapshot(corpus_file: Path, tmp_path: Path) -> None:
    text = corpus_file.read_bytes()
    start = text.index(b"The wanderer")
    end = text.index(b"AFTERWORD")
    snapshot = tmp_path / "out" / "tree.json"
    tree = load_tree(CorpusConfig(path=corpus_file, start=start, end=end, snapshot=snapshot))

    assert "front" not in tree and "matter" not in tree
    assert tree["wanderer"].counts == {"went": 1, "spoke": 1}
    payload = json.loads(snapshot.read_text(encoding="utf-8"))
    assert payload["_appearances"] == {"total": tree.total}
    assert load_snapshot(snapshot) == tree


def test_load_tree_falls_back_to_sample_corpus() -> None:
    tree = load_tree(CorpusConfig())
    assert tree.total > 0
    assert "wanderer" in tree


def test_missing_corpus_is_a_corpus_error(tmp_path: Path) -> None:
    with pytest.raises(CorpusError):
        read_corpus(tmp_path / "missing.txt")


def test_unreadable_snapshot_is_a_snapshot_error(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError):
        load_snapshot(path)
