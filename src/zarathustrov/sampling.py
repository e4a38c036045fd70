"""Weighted choice over token counts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Optional

import numpy as np

from .errors import EmptyDistribution

TokenPredicate = Callable[[str], bool]


def weighted_choice(
    counts: Mapping[str, int],
    total: int,
    rng: np.random.Generator,
    exclude: Optional[TokenPredicate] = None,
) -> str:
    """Return one token of ``counts`` with probability ``count / total``.

    ``total`` is the running aggregate kept next to ``counts``. When
    ``exclude`` is given, matching tokens are skipped and their weight is
    removed from the total so the remaining tokens are reweighted.

    The scan walks ``counts`` in whatever order the mapping yields; the single
    draw from ``rng`` is the only source of randomness.
    """

    effective_total = total
    if exclude is not None:
        effective_total -= sum(count for token, count in counts.items() if exclude(token))
    if effective_total <= 0:
        raise EmptyDistribution(f"No weight left to sample from (effective total {effective_total})")

    remaining = int(rng.integers(1, effective_total + 1))
    for token, count in counts.items():
        if exclude is not None and exclude(token):
            continue
        remaining -= count
        if remaining <= 0:
            return token
    raise EmptyDistribution(f"Counts sum to less than the recorded total {total}")


__all__ = ["TokenPredicate", "weighted_choice"]
