from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from zarathustrov.config import BotConfig
from zarathustrov.model import Tree, build_tree

EXAMPLE_CORPUS = "the cat sat. the dog ran!"


@pytest.fixture
def config() -> BotConfig:
    return BotConfig()


@pytest.fixture
def example_tree() -> Tree:
    return build_tree(EXAMPLE_CORPUS)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def corpus_file(tmp_path: Path) -> Iterator[Path]:
    path = tmp_path / "corpus.txt"
    path.write_text(
        "FRONT MATTER\n"
        "The wanderer went down. The wanderer spoke, and the people laughed! "
        "I love the people, he said. Did they hear him? They heard nothing.\n"
        "AFTERWORD",
        encoding="utf-8",
    )
    yield path
