"""Command line interface for newsbabble."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from .config import BabbleConfig, load_config
from .diagnostics import diagnose
from .errors import BabbleError
from .logging import configure_logging, get_logger
from .pipelines import babble, build_from_sources
from .sources import FILTER_PLACEHOLDER

LOGGER = get_logger(__name__)


def _check_filter(value: Optional[str]) -> Optional[str]:
    if value is not None and FILTER_PLACEHOLDER not in value:
        raise typer.BadParameter(f"Missing {FILTER_PLACEHOLDER} in filter command")
    return value


FILES_ARGUMENT = typer.Argument(
    None,
    help="Articles to read. Standard input is read when none are given.",
)
COUNT_OPTION = typer.Option(
    None,
    "--count",
    "-n",
    min=0,
    help="Number of articles to generate [default: 10].",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Report progress while reading input.",
)
FILTER_OPTION = typer.Option(
    None,
    "--filter",
    "-f",
    callback=_check_filter,
    help="Shell command run on each file; %s is replaced by the file name.",
)
SEED_OPTION = typer.Option(
    None,
    min=0,
    help="Seed for reproducible output.",
)
MARGIN_OPTION = typer.Option(
    None,
    min=1,
    help="Column at which output lines wrap [default: 75].",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to a YAML or JSON configuration file.",
)
NEWS_FILTER_OPTION = typer.Option(
    False,
    "--news",
    help="Skip article headers, quoted text and signatures.",
)
STATS_OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    help="Optional path to write the report as JSON.",
)

app = typer.Typer(
    help="Generate simulated news articles from a second-order Markov chain over the input."
)


def _load(config_path: Optional[Path], verbose: bool, **sections: dict[str, Any]) -> BabbleConfig:
    override: dict[str, Any] = {}
    for name, values in sections.items():
        present = {key: value for key, value in values.items() if value is not None}
        if present:
            override[name] = present
    if verbose:
        override["verbose"] = True
    config = load_config(config_path, [override])
    configure_logging(logging.INFO if config.verbose else logging.WARNING)
    return config


def _fail(exc: BaseException) -> typer.Exit:
    typer.echo(f"newsbabble: {exc}", err=True)
    return typer.Exit(code=1)


@app.command()
def generate(
    files: Optional[List[Path]] = FILES_ARGUMENT,
    count: Optional[int] = COUNT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    filter_command: Optional[str] = FILTER_OPTION,
    seed: Optional[int] = SEED_OPTION,
    margin: Optional[int] = MARGIN_OPTION,
    news: bool = NEWS_FILTER_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Read the input and print simulated articles separated by form feeds."""

    config = _load(
        config_path,
        verbose,
        ingest={"filter_command": filter_command},
        generator={"count": count, "seed": seed},
        output={"margin": margin},
        tokenizer={"news_filter": news or None},
    )
    try:
        babble(files or [], sys.stdout, config)
    except (BabbleError, OSError) as exc:
        raise _fail(exc) from exc


@app.command()
def stats(
    files: Optional[List[Path]] = FILES_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
    filter_command: Optional[str] = FILTER_OPTION,
    news: bool = NEWS_FILTER_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
    output: Optional[Path] = STATS_OUTPUT_OPTION,
) -> None:
    """Build the model and print its statistics and consistency report."""

    config = _load(
        config_path,
        verbose,
        ingest={"filter_command": filter_command},
        tokenizer={"news_filter": news or None},
    )
    try:
        model = build_from_sources(files or [], config)
    except (BabbleError, OSError) as exc:
        raise _fail(exc) from exc
    report = diagnose(model)
    typer.echo(str(report))
    if output is not None:
        report.to_json(output)
        LOGGER.info("Wrote report to %s", output)
    if not report.ok:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
