"""Bundled data for the Zarathustrov package."""

from __future__ import annotations

from importlib import resources


def load_sample_corpus() -> str:
    with resources.files(__package__).joinpath("sample_corpus.txt").open("r", encoding="utf-8") as stream:
        return stream.read()


__all__ = ["load_sample_corpus"]
