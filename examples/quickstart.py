"""Minimal quickstart script for Zarathustrov.

The script builds a tree from the bundled sample corpus, prints a short
summary of it, and generates a handful of posts without publishing them.
"""

from pathlib import Path

import numpy as np

from zarathustrov import GeneratorConfig, MarkovGenerator, build_tree
from zarathustrov.corpus import save_snapshot
from zarathustrov.data import load_sample_corpus

SNAPSHOT_PATH = Path("artifacts/tree.json")


def main() -> None:
    tree = build_tree(load_sample_corpus())
    summary = tree.summary(top=5)
    print(f"{summary['keys']} keys, {summary['total']} observations")
    print("Most frequent keys:", ", ".join(key for key, _ in summary["top_keys"]))
    save_snapshot(tree, SNAPSHOT_PATH)

    generator = MarkovGenerator(
        tree,
        GeneratorConfig(max_length=140, capitalize=["i"]),
        rng=np.random.default_rng(2017),
    )
    for _ in range(3):
        result = generator.generate()
        print(f"\n{result.text}\n({len(result.text)} chars, {result.attempts} attempt(s))")


if __name__ == "__main__":
    main()
