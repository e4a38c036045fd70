"""Zarathustrov: word-level Markov text for scheduled social posts."""

from .bot import Bot, build_bot, run_bot
from .config import BotConfig, CorpusConfig, GeneratorConfig, PosterConfig, ScheduleConfig, load_config
from .errors import (
    CorpusError,
    DegenerateTree,
    EmptyDistribution,
    GenerationFailed,
    PostingError,
    SnapshotError,
    ZarathustrovError,
)
from .generator import GenerationResult, MarkovGenerator, generate_text
from .model import Node, Tree, TreeBuilder, build_tree
from .sampling import weighted_choice

__all__ = [
    "Bot",
    "BotConfig",
    "CorpusConfig",
    "CorpusError",
    "DegenerateTree",
    "EmptyDistribution",
    "GenerationFailed",
    "GenerationResult",
    "GeneratorConfig",
    "MarkovGenerator",
    "Node",
    "PosterConfig",
    "PostingError",
    "ScheduleConfig",
    "SnapshotError",
    "Tree",
    "TreeBuilder",
    "ZarathustrovError",
    "build_bot",
    "build_tree",
    "generate_text",
    "load_config",
    "run_bot",
    "weighted_choice",
]

__version__ = "0.1.0"
