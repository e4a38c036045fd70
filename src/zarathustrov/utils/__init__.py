"""Utility helpers shared across the Zarathustrov package."""

from .io import load_json, save_json
from .random import create_rng, deterministic_hash, resolve_seed
from .text import (
    CLAUSE_SEPARATORS,
    PUNCTUATION,
    SENTENCE_TERMINATORS,
    capitalise,
    is_letter,
    is_punctuation,
    is_separator,
    is_terminator,
)

__all__ = [
    "CLAUSE_SEPARATORS",
    "PUNCTUATION",
    "SENTENCE_TERMINATORS",
    "capitalise",
    "create_rng",
    "deterministic_hash",
    "is_letter",
    "is_punctuation",
    "is_separator",
    "is_terminator",
    "load_json",
    "resolve_seed",
    "save_json",
]
