from __future__ import annotations

import re

import numpy as np
import pytest

from zarathustrov.config import GeneratorConfig
from zarathustrov.data import load_sample_corpus
from zarathustrov.errors import DegenerateTree, EmptyDistribution, GenerationFailed
from zarathustrov.generator import GenerationResult, MarkovGenerator, generate_text
from zarathustrov.model import Tree, build_tree

SENTENCE_SPLIT = re.compile(r"(?<=[.!?]) ")


def _sentences(text: str) -> list[str]:
    return SENTENCE_SPLIT.split(text)


@pytest.mark.parametrize("seed", range(25))
def test_example_tree_output_is_bounded_and_terminated(example_tree: Tree, seed: int) -> None:
    result = MarkovGenerator(example_tree, rng=np.random.default_rng(seed)).generate()
    assert isinstance(result, GenerationResult)
    assert len(result.text) <= 280
    assert result.text[-1] in ".!"
    assert result.text.split()[0] in {"The", "Cat", "Sat", "Dog", "Ran", "Sat.", "Ran!"}
    assert result.sentences == len(_sentences(result.text))
    for sentence in _sentences(result.text):
        assert sentence[0].isupper()


@pytest.mark.parametrize("max_length", [60, 140, 280])
@pytest.mark.parametrize("seed", range(10))
def test_sample_corpus_respects_length_and_boundaries(max_length: int, seed: int) -> None:
    tree = build_tree(load_sample_corpus())
    config = GeneratorConfig(max_length=max_length)
    text = generate_text(tree, config=config, rng=np.random.default_rng(seed))
    assert len(text) <= max_length
    assert text[-1] in ".!?"
    assert not re.search(r"[,;:]\s*[.!?]$", text)
    assert text[0].isupper()


def test_short_limit_still_produces_whole_sentences(example_tree: Tree) -> None:
    config = GeneratorConfig(max_length=20)
    for seed in range(20):
        text = generate_text(example_tree, config=config, rng=np.random.default_rng(seed))
        assert len(text) <= 20
        assert all(s in {"The cat sat.", "The dog ran!", "Cat sat.", "Sat.", "Dog ran!", "Ran!"} for s in _sentences(text))


def test_same_seed_gives_same_text(example_tree: Tree) -> None:
    first = generate_text(example_tree, rng=np.random.default_rng(99))
    second = generate_text(example_tree, rng=np.random.default_rng(99))
    assert first == second


def test_empty_tree_fails_fast() -> None:
    with pytest.raises(DegenerateTree):
        MarkovGenerator(Tree())


def test_empty_window_is_an_empty_distribution() -> None:
    tree = build_tree("the cat sat.", 0, 0)
    with pytest.raises(EmptyDistribution):
        generate_text(tree)


def test_corpus_without_terminators_fails_after_attempt_budget() -> None:
    tree = build_tree("one two three one two three ")
    generator = MarkovGenerator(tree, GeneratorConfig(max_attempts=5), rng=np.random.default_rng(0))
    with pytest.raises(GenerationFailed) as excinfo:
        generator.generate()
    assert excinfo.value.attempts == 5


def test_dead_end_without_sentence_is_retried_then_fails() -> None:
    tree = build_tree("alpha beta ")
    generator = MarkovGenerator(tree, GeneratorConfig(max_attempts=3), rng=np.random.default_rng(0))
    with pytest.raises(GenerationFailed):
        generator.generate()


def test_dead_end_after_sentence_keeps_completed_sentences() -> None:
    tree = build_tree("done. alpha beta ")
    for seed in range(20):
        result = MarkovGenerator(tree, rng=np.random.default_rng(seed)).generate()
        assert set(_sentences(result.text)) == {"Done."}


def test_clause_separator_is_followed_by_a_word() -> None:
    tree = build_tree("yes, sir. yes, madam. yes; indeed.")
    for seed in range(30):
        text = generate_text(tree, rng=np.random.default_rng(seed))
        for match in re.finditer(r"[,;:]", text):
            assert re.match(r"[,;:] [a-z]", text[match.start():])
        assert text[-1] == "."


def test_pronoun_i_is_capitalised() -> None:
    tree = build_tree("i think so. so i think. then i left.")
    for seed in range(20):
        text = generate_text(tree, rng=np.random.default_rng(seed))
        assert not re.search(r"\bi\b", text)


def test_configured_names_are_capitalised() -> None:
    tree = build_tree("then zarathustra spoke. then zarathustra laughed.")
    config = GeneratorConfig(capitalize=["Zarathustra"])
    for seed in range(20):
        text = generate_text(tree, config=config, rng=np.random.default_rng(seed))
        assert "zarathustra" not in text


def test_separator_after_punctuation_only_node_stops_at_last_sentence(rng: np.random.Generator) -> None:
    tree = build_tree("done. go end, ")
    assert tree["end"].counts == {",": 1}
    generator = MarkovGenerator(tree, rng=rng)
    for _ in range(30):
        result = generator.generate()
        assert set(_sentences(result.text)) == {"Done."}
        assert "," not in result.text
