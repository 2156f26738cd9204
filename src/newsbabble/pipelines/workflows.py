"""High-level workflows that combine ingestion and generation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Optional, TextIO

from ..config import BabbleConfig
from ..generator import Generator, NumpyRandomSource, RandomSource
from ..ingest import Ingestor
from ..logging import get_logger
from ..model import ChainModel
from ..output import LineWrapper, write_articles
from ..sources import iter_units

LOGGER = get_logger(__name__)


def build_from_sources(
    paths: Sequence[Path],
    config: Optional[BabbleConfig] = None,
    stdin: Optional[TextIO] = None,
) -> ChainModel:
    """Read every source in ``paths`` (or standard input) into a new model."""
    config = config or BabbleConfig()
    progress = config.ingest.progress_interval if config.verbose else None
    model = ChainModel(progress_interval=progress)
    units = iter_units(paths, ingest=config.ingest, tokenizer=config.tokenizer, stdin=stdin)
    return Ingestor(model).ingest(units)


def babble(
    paths: Sequence[Path],
    stream: TextIO,
    config: Optional[BabbleConfig] = None,
    random_source: Optional[RandomSource] = None,
    stdin: Optional[TextIO] = None,
) -> ChainModel:
    """Build a model from ``paths`` and write generated articles to ``stream``."""
    config = config or BabbleConfig()
    model = build_from_sources(paths, config, stdin=stdin)
    if random_source is None:
        random_source = NumpyRandomSource(seed=config.generator.seed)
    generator = Generator(model, random_source)
    sink = LineWrapper(stream, margin=config.output.margin)
    written = write_articles(generator, sink, config.generator.count, separator=config.output.separator)
    LOGGER.info("Wrote %d articles (%d tokens)", config.generator.count, written)
    return model
