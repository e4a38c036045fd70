"""Exception hierarchy for Zarathustrov."""

from __future__ import annotations


class ZarathustrovError(Exception):
    """Base class for every error raised by the package."""


class EmptyDistribution(ZarathustrovError):
    """Raised when a weighted draw has no effective weight to choose from."""


class DegenerateTree(EmptyDistribution):
    """Raised when a tree holds no observations at all."""


class GenerationFailed(ZarathustrovError):
    """Raised when no sentence-terminated text was produced within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Unable to generate a terminated sentence after {attempts} attempts; "
            "check the corpus window and the maximum length"
        )
        self.attempts = attempts


class CorpusError(ZarathustrovError):
    """Raised when the corpus cannot be read or the byte window is invalid."""


class SnapshotError(ZarathustrovError):
    """Raised when a tree snapshot is malformed or violates its totals."""


class PostingError(ZarathustrovError):
    """Raised when the posting collaborator rejects a status."""


class ConfigError(ZarathustrovError):
    """Raised for configuration files that cannot be interpreted."""


__all__ = [
    "ConfigError",
    "CorpusError",
    "DegenerateTree",
    "EmptyDistribution",
    "GenerationFailed",
    "PostingError",
    "SnapshotError",
    "ZarathustrovError",
]
