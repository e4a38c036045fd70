"""Sentence-bounded text generation from a :class:`~zarathustrov.model.Tree`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import GeneratorConfig
from .errors import DegenerateTree, EmptyDistribution, GenerationFailed
from .logging import get_logger
from .model import Tree
from .utils import capitalise, create_rng, is_separator, is_terminator

LOGGER = get_logger(__name__)


@dataclass
class GenerationResult:
    text: str
    attempts: int
    sentences: int


class MarkovGenerator:
    """Random walk over a tree that stops on a sentence boundary.

    Each attempt starts from a key drawn by overall frequency and keeps
    appending successors until the text reaches ``max_length`` or walks into a
    key with nothing usable recorded after it. The text is then cut after the
    last sentence terminator. Attempts without any terminator are thrown away
    and restarted, at most ``max_attempts`` times.
    """

    def __init__(
        self,
        tree: Tree,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if tree.total <= 0:
            raise DegenerateTree("The tree holds no observations; the corpus window produced no words")
        self.tree = tree
        self.config = config or GeneratorConfig()
        self.rng = rng if rng is not None else create_rng()
        self._capitalize = frozenset(self.config.capitalize)

    def generate(self) -> GenerationResult:
        for attempt in range(1, self.config.max_attempts + 1):
            outcome = self._attempt()
            if outcome is None:
                LOGGER.debug("Attempt %d produced no complete sentence", attempt)
                continue
            text, sentences = outcome
            return GenerationResult(text=text, attempts=attempt, sentences=sentences)
        raise GenerationFailed(self.config.max_attempts)

    def _attempt(self) -> Optional[tuple[str, int]]:
        key = self.tree.sample_key(self.rng)
        text = capitalise(key)
        cut = 0
        sentences = 0
        try:
            while len(text) < self.config.max_length:
                node = self.tree.get(key)
                if node is None:
                    raise EmptyDistribution(f"Nothing was recorded after {key!r}")
                word = node.sample(self.rng)
                if is_terminator(word):
                    cut = len(text) + 1
                    sentences += 1
                    key = self.tree.sample_key(self.rng)
                    text = f"{text}{word} {capitalise(key)}"
                elif is_separator(word):
                    key = node.sample(self.rng, omit_punctuation=True)
                    text = f"{text}{word} {key}"
                elif word in self._capitalize:
                    text = f"{text} {capitalise(word)}"
                    key = word
                else:
                    text = f"{text} {word}"
                    key = word
        except EmptyDistribution as exc:
            LOGGER.debug("Walk stopped early: %s", exc)
        if not cut:
            return None
        return text[:cut], sentences


def generate_text(
    tree: Tree,
    config: Optional[GeneratorConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> str:
    """Convenience wrapper returning only the generated text."""
    return MarkovGenerator(tree, config=config, rng=rng).generate().text


__all__ = ["GenerationResult", "MarkovGenerator", "generate_text"]
