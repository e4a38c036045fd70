"""Character classes and casing helpers shared by the builder and generator."""

from __future__ import annotations

SENTENCE_TERMINATORS = frozenset(".!?")
CLAUSE_SEPARATORS = frozenset(",;:")
PUNCTUATION = SENTENCE_TERMINATORS | CLAUSE_SEPARATORS


def is_letter(char: str) -> bool:
    """Return ``True`` for ASCII letters only."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def is_terminator(token: str) -> bool:
    return token in SENTENCE_TERMINATORS


def is_separator(token: str) -> bool:
    return token in CLAUSE_SEPARATORS


def is_punctuation(token: str) -> bool:
    return token in PUNCTUATION


def capitalise(token: str) -> str:
    """Upper-case the first character of ``token``."""
    return token[:1].upper() + token[1:]

