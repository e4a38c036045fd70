"""Command line interface for Zarathustrov."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from .bot import build_bot
from .config import BotConfig, load_config
from .corpus import load_tree, read_corpus, save_snapshot
from .errors import ZarathustrovError
from .generator import MarkovGenerator
from .logging import configure_logging, get_logger
from .model import build_tree
from .utils import create_rng

LOGGER = get_logger(__name__)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to a YAML or JSON bot configuration.",
)
CORPUS_ARGUMENT = typer.Argument(..., help="Plain text corpus to learn from.")
CORPUS_OPTION = typer.Option(
    None,
    help="Corpus file; overrides corpus.path from the configuration.",
)
START_OPTION = typer.Option(0, help="First byte of the corpus window.")
END_OPTION = typer.Option(
    None,
    help="Byte after the last one of the corpus window; defaults to end of file.",
)
SNAPSHOT_OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    help="Optional path to write the tree snapshot as JSON.",
)
COUNT_OPTION = typer.Option(1, min=1, help="Number of posts to generate.")
MAX_LENGTH_OPTION = typer.Option(None, min=1, help="Maximum characters per post.")
SEED_OPTION = typer.Option(None, help="Seed for the random generator.")
LIVE_OPTION = typer.Option(
    None,
    "--live/--dry-run",
    help="Publish for real, or only log the post. Defaults to poster.dry_run.",
)
ITERATIONS_OPTION = typer.Option(
    None,
    min=1,
    help="Stop after this many posts; runs forever when omitted.",
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")
LOG_LEVEL_OPTION = typer.Option("INFO", "--log-level", help="Logging level name, e.g. WARNING.")

app = typer.Typer(help="Build a word-level Markov model from a corpus and post what it writes.")


@app.callback()
def main(verbose: bool = VERBOSE_OPTION, log_level: str = LOG_LEVEL_OPTION) -> None:
    try:
        configure_logging(logging.DEBUG if verbose else log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


def _load_bot_config(
    config_path: Optional[Path],
    *,
    corpus: Optional[Path] = None,
    max_length: Optional[int] = None,
    seed: Optional[int] = None,
    live: Optional[bool] = None,
) -> BotConfig:
    overrides: list[dict[str, Any]] = []
    if corpus is not None:
        overrides.append({"corpus": {"path": str(corpus)}})
    if max_length is not None:
        overrides.append({"generator": {"max_length": max_length}})
    if seed is not None:
        overrides.append({"seed": seed})
    if live is not None:
        overrides.append({"poster": {"dry_run": not live}})
    return load_config(config_path, overrides)


def _fail(exc: ZarathustrovError) -> typer.Exit:
    LOGGER.error("%s", exc)
    return typer.Exit(code=1)


@app.command()
def build(
    corpus: Path = CORPUS_ARGUMENT,
    start: int = START_OPTION,
    end: Optional[int] = END_OPTION,
    output: Optional[Path] = SNAPSHOT_OUTPUT_OPTION,
) -> None:
    """Build the tree for a corpus window and print a summary."""

    try:
        tree = build_tree(read_corpus(corpus), start, end)
    except ZarathustrovError as exc:
        raise _fail(exc) from exc
    typer.echo(json.dumps(tree.summary(), indent=2))
    if output is not None:
        save_snapshot(tree, output)


@app.command()
def generate(
    config_path: Optional[Path] = CONFIG_OPTION,
    corpus: Optional[Path] = CORPUS_OPTION,
    count: int = COUNT_OPTION,
    max_length: Optional[int] = MAX_LENGTH_OPTION,
    seed: Optional[int] = SEED_OPTION,
) -> None:
    """Print generated posts without publishing them."""

    try:
        config = _load_bot_config(config_path, corpus=corpus, max_length=max_length, seed=seed)
        tree = load_tree(config.corpus)
        generator = MarkovGenerator(tree, config.generator, create_rng(config.seed))
        for _ in range(count):
            typer.echo(generator.generate().text)
    except ZarathustrovError as exc:
        raise _fail(exc) from exc


@app.command()
def post(
    config_path: Optional[Path] = CONFIG_OPTION,
    live: Optional[bool] = LIVE_OPTION,
) -> None:
    """Generate one post and hand it to the configured poster."""

    try:
        config = _load_bot_config(config_path, live=live)
        receipt = build_bot(config).post_once()
    except ZarathustrovError as exc:
        raise _fail(exc) from exc
    typer.echo(receipt.text)
    if receipt.url:
        typer.echo(receipt.url)


@app.command()
def run(
    config_path: Optional[Path] = CONFIG_OPTION,
    iterations: Optional[int] = ITERATIONS_OPTION,
) -> None:
    """Post on the configured schedule."""

    try:
        config = _load_bot_config(config_path)
        bot = build_bot(config)
        LOGGER.info("Posting every %s minutes", config.schedule.interval_minutes)
        bot.run(iterations=iterations)
    except ZarathustrovError as exc:
        raise _fail(exc) from exc


if __name__ == "__main__":
    app()
