"""Randomness helpers."""

from __future__ import annotations

import hashlib
import os
from typing import Optional

import numpy as np

SEED_ENV_VAR = "ZARATHUSTROV_SEED"


def deterministic_hash(value: str) -> int:
    """Return a deterministic integer hash for ``value``."""
    digest = hashlib.sha256(value.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)


def resolve_seed(seed: Optional[int] = None) -> Optional[int]:
    """Pick the seed from the argument, then the environment.

    Integer-looking environment values are used verbatim, anything else is
    hashed. ``None`` means the generator draws fresh OS entropy.
    """
    if seed is not None:
        return seed
    raw = os.getenv(SEED_ENV_VAR)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return deterministic_hash(raw) % (2**32)


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the process-wide random generator."""
    return np.random.default_rng(resolve_seed(seed))
