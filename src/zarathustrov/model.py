"""Word-level Markov model: the frequency tree and the builder that fills it."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import numpy as np

from .errors import CorpusError, SnapshotError
from .logging import get_logger
from .sampling import weighted_choice
from .utils import is_letter, is_punctuation, is_terminator

LOGGER = get_logger(__name__)

# Reserved names used only by the JSON snapshot format.
SNAPSHOT_TOTAL_KEY = "_appearances"
SNAPSHOT_GLOBAL_KEY = "total"


@dataclass
class Node:
    """Successor counts for a single key together with their running total."""

    counts: dict[str, int] = field(default_factory=dict)
    total: int = 0

    def increment(self, value: str) -> None:
        self.total += 1
        self.counts[value] = self.counts.get(value, 0) + 1

    def sample(self, rng: np.random.Generator, *, omit_punctuation: bool = False) -> str:
        """Draw a successor; ``omit_punctuation`` reweights over words only."""
        return weighted_choice(
            self.counts,
            self.total,
            rng,
            exclude=is_punctuation if omit_punctuation else None,
        )

    def __getitem__(self, value: str) -> int:
        return self.counts.get(value, 0)

    def __contains__(self, value: object) -> bool:
        return value in self.counts

    def __len__(self) -> int:
        return len(self.counts)


class _NodeTotals(Mapping[str, int]):
    """Read-only view mapping each key of a tree to its node total."""

    def __init__(self, nodes: Mapping[str, Node]) -> None:
        self._nodes = nodes

    def __getitem__(self, key: str) -> int:
        return self._nodes[key].total

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


@dataclass
class Tree:
    """Mapping of key tokens to their :class:`Node` plus a global total."""

    nodes: dict[str, Node] = field(default_factory=dict)
    total: int = 0

    def update(self, key: str, value: str) -> None:
        """Record one observation of ``value`` following ``key``."""
        self.total += 1
        node = self.nodes.get(key)
        if node is None:
            node = self.nodes[key] = Node()
        node.increment(value)

    def sample_key(self, rng: np.random.Generator) -> str:
        """Draw a key weighted by how often it was observed."""
        return weighted_choice(_NodeTotals(self.nodes), self.total, rng)

    def get(self, key: str) -> Optional[Node]:
        return self.nodes.get(key)

    def __getitem__(self, key: str) -> Node:
        return self.nodes[key]

    def __contains__(self, key: object) -> bool:
        return key in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def summary(self, top: int = 10) -> dict[str, Any]:
        ranked = sorted(self.nodes.items(), key=lambda item: (-item[1].total, item[0]))
        return {
            "keys": len(self.nodes),
            "total": self.total,
            "top_keys": [[key, node.total] for key, node in ranked[:top]],
        }

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for key, node in self.nodes.items():
            entry: dict[str, int] = dict(node.counts)
            entry[SNAPSHOT_TOTAL_KEY] = node.total
            payload[key] = entry
        payload[SNAPSHOT_TOTAL_KEY] = {SNAPSHOT_GLOBAL_KEY: self.total}
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Tree:
        """Rebuild a tree from :meth:`to_dict` output, checking its totals."""

        if not isinstance(payload, Mapping):
            raise SnapshotError("Expected a mapping at the root of the snapshot")
        header = payload.get(SNAPSHOT_TOTAL_KEY)
        if not isinstance(header, Mapping) or not isinstance(header.get(SNAPSHOT_GLOBAL_KEY), int):
            raise SnapshotError(f"Snapshot is missing the {SNAPSHOT_TOTAL_KEY}.{SNAPSHOT_GLOBAL_KEY} counter")

        tree = cls(total=header[SNAPSHOT_GLOBAL_KEY])
        node_sum = 0
        for key, entry in payload.items():
            if key == SNAPSHOT_TOTAL_KEY:
                continue
            if is_punctuation(key):
                raise SnapshotError(f"Punctuation {key!r} cannot be a key")
            if not isinstance(entry, Mapping):
                raise SnapshotError(f"Entry for {key!r} is not a mapping")
            counts = {token: count for token, count in entry.items() if token != SNAPSHOT_TOTAL_KEY}
            if not counts or not all(isinstance(count, int) and count > 0 for count in counts.values()):
                raise SnapshotError(f"Entry for {key!r} holds no positive integer counts")
            node_total = entry.get(SNAPSHOT_TOTAL_KEY)
            if node_total != sum(counts.values()):
                raise SnapshotError(f"Total for {key!r} does not match its counts")
            tree.nodes[key] = Node(counts=counts, total=node_total)
            node_sum += node_total
        if node_sum != tree.total:
            raise SnapshotError(f"Global total {tree.total} does not match node totals {node_sum}")
        return tree


class TreeBuilder:
    """Tokenize characters and accumulate word and punctuation successions.

    Letters accumulate into a pending word. Any other character closes the
    pending word: the previous word gains it as a successor, and terminators
    and separators are recorded as successors of the word they follow. A
    sentence terminator clears the previous word so the next sentence starts
    a fresh chain. State survives across :meth:`feed` calls, so a corpus can be
    streamed in chunks.
    """

    def __init__(self, tree: Optional[Tree] = None) -> None:
        self.tree = tree if tree is not None else Tree()
        self._previous = ""
        self._pending: list[str] = []

    def feed(self, text: str) -> None:
        for char in text:
            if is_letter(char):
                self._pending.append(char)
                continue
            current = "".join(self._pending).lower()
            self._pending.clear()
            if not current:
                continue
            if self._previous:
                self.tree.update(self._previous, current)
            if is_punctuation(char):
                self.tree.update(current, char)
            self._previous = "" if is_terminator(char) else current


def build_tree(text: Union[str, bytes], start: int = 0, end: Optional[int] = None) -> Tree:
    """Build a :class:`Tree` from the ``[start, end)`` byte window of ``text``."""

    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if end is None:
        end = len(data)
    if start < 0 or end > len(data) or start > end:
        raise CorpusError(f"Byte window [{start}, {end}) does not fit a corpus of {len(data)} bytes")

    builder = TreeBuilder()
    builder.feed(data[start:end].decode("utf-8", errors="replace"))
    LOGGER.info(
        "Built tree with %d keys and %d observations from %d bytes",
        len(builder.tree),
        builder.tree.total,
        end - start,
    )
    return builder.tree


__all__ = ["Node", "Tree", "TreeBuilder", "build_tree"]
