"""Scheduled generate-and-post loop."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from .config import BotConfig, ScheduleConfig
from .corpus import load_tree
from .errors import PostingError
from .generator import MarkovGenerator
from .logging import get_logger
from .posting import PostReceipt, Poster, create_poster
from .utils import create_rng

LOGGER = get_logger(__name__)

SleepFn = Callable[[float], None]


@dataclass
class Bot:
    generator: MarkovGenerator
    poster: Poster
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)

    def post_once(self) -> PostReceipt:
        result = self.generator.generate()
        LOGGER.info(
            "Generated %d characters, %d sentences, after %d attempts",
            len(result.text),
            result.sentences,
            result.attempts,
        )
        try:
            return self.poster.post(result.text)
        except PostingError:
            LOGGER.error("Posting failed; stopping")
            raise

    def run(self, iterations: Optional[int] = None, sleep: SleepFn = time.sleep) -> int:
        """Post every ``schedule.interval_minutes`` until ``iterations`` posts are made.

        ``iterations=None`` runs forever. Returns the number of posts made.
        """

        interval = self.schedule.interval_minutes * 60.0
        posted = 0
        while iterations is None or posted < iterations:
            self.post_once()
            posted += 1
            if iterations is not None and posted >= iterations:
                break
            LOGGER.debug("Sleeping %.0f seconds", interval)
            sleep(interval)
        return posted


def build_bot(
    config: BotConfig,
    *,
    poster: Optional[Poster] = None,
    rng: Optional[np.random.Generator] = None,
) -> Bot:
    """Load the corpus once and wire the generator to a poster."""

    tree = load_tree(config.corpus)
    generator = MarkovGenerator(tree, config.generator, rng if rng is not None else create_rng(config.seed))
    return Bot(
        generator=generator,
        poster=poster if poster is not None else create_poster(config.poster),
        schedule=config.schedule,
    )


def run_bot(
    config: BotConfig,
    *,
    poster: Optional[Poster] = None,
    iterations: Optional[int] = None,
    sleep: SleepFn = time.sleep,
) -> int:
    bot = build_bot(config, poster=poster)
    return bot.run(iterations=iterations, sleep=sleep)


__all__ = ["Bot", "build_bot", "run_bot"]
