from __future__ import annotations

import pytest

from zarathustrov.utils import capitalise, create_rng, deterministic_hash, is_letter, resolve_seed
from zarathustrov.utils.random import SEED_ENV_VAR


def test_explicit_seed_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEED_ENV_VAR, "7")
    assert resolve_seed(3) == 3


def test_seed_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEED_ENV_VAR, "7")
    assert resolve_seed() == 7
    monkeypatch.setenv(SEED_ENV_VAR, "thus-spoke")
    assert resolve_seed() == deterministic_hash("thus-spoke") % (2**32)


def test_no_seed_means_entropy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)
    assert resolve_seed() is None


def test_seeded_generators_agree() -> None:
    assert create_rng(5).integers(0, 1000, size=8).tolist() == create_rng(5).integers(0, 1000, size=8).tolist()


@pytest.mark.parametrize("char,expected", [("a", True), ("Z", True), ("é", False), ("1", False), ("'", False)])
def test_only_ascii_letters_count(char: str, expected: bool) -> None:
    assert is_letter(char) is expected


def test_capitalise() -> None:
    assert capitalise("zarathustra") == "Zarathustra"
    assert capitalise("i") == "I"
    assert capitalise("") == ""
