"""Input sources: plain files, standard input, or a filter command per file."""

from __future__ import annotations

import io
import shlex
import subprocess
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, TextIO

from .config import IngestConfig, TokenizerConfig
from .errors import SourceError
from .logging import get_logger
from .tokenizer import tokenize_lines

LOGGER = get_logger(__name__)

FILTER_PLACEHOLDER = "%s"


def check_filter_command(filter_command: str) -> None:
    if FILTER_PLACEHOLDER not in filter_command:
        raise SourceError(f"Missing {FILTER_PLACEHOLDER} in filter command {filter_command!r}")


def render_filter_command(filter_command: str, path: Path) -> str:
    """Substitute the shell-quoted ``path`` for ``%s`` in ``filter_command``."""
    check_filter_command(filter_command)
    return filter_command.replace(FILTER_PLACEHOLDER, shlex.quote(str(path)))


@contextmanager
def open_stdin(encoding: str = "utf-8") -> Iterator[TextIO]:
    """Decode standard input the same way files are decoded.

    The wrapper is detached afterwards so the process-wide stdin stays open.
    """
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield sys.stdin
        return
    stream = io.TextIOWrapper(buffer, encoding=encoding, errors="replace", newline="")
    try:
        yield stream
    finally:
        stream.detach()


@contextmanager
def open_source(
    path: Path,
    filter_command: Optional[str] = None,
    encoding: str = "utf-8",
) -> Iterator[TextIO]:
    """Open ``path`` directly, or read the output of ``filter_command`` run on it.

    Line endings are passed through untranslated, so a carriage return breaks a
    run of newlines just as any other whitespace does.
    """
    if filter_command is None:
        try:
            handle = open(path, "r", encoding=encoding, errors="replace", newline="")
        except OSError as exc:
            raise SourceError(f"{path}: {exc.strerror or exc}") from exc
        with handle:
            yield handle
        return

    command = render_filter_command(filter_command, path)
    LOGGER.debug("Running filter %s", command)
    try:
        process = subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
        )
    except OSError as exc:
        raise SourceError(f"{filter_command}: {exc.strerror or exc}") from exc
    assert process.stdout is not None
    stream = io.TextIOWrapper(process.stdout, encoding=encoding, errors="replace", newline="")
    try:
        yield stream
    finally:
        stream.close()
        returncode = process.wait()
        if returncode != 0:
            LOGGER.warning("Filter %r exited with status %d", command, returncode)


def iter_units(
    paths: Sequence[Path],
    ingest: Optional[IngestConfig] = None,
    tokenizer: Optional[TokenizerConfig] = None,
    stdin: Optional[TextIO] = None,
) -> Iterator[Iterator[str]]:
    """Yield one token iterator per input unit.

    Each iterator must be exhausted before the next one is requested, since the
    underlying stream is closed as soon as iteration moves on. Without
    ``paths`` standard input is the only unit.
    """
    ingest = ingest or IngestConfig()
    if ingest.filter_command is not None:
        check_filter_command(ingest.filter_command)
    if not paths:
        if ingest.filter_command is not None:
            raise SourceError("Can't use a filter command with standard input")
        if stdin is not None:
            yield tokenize_lines(stdin, tokenizer)
            return
        with open_stdin(ingest.encoding) as stream:
            yield tokenize_lines(stream, tokenizer)
        return
    for path in paths:
        LOGGER.debug("Reading %s", path)
        with open_source(Path(path), ingest.filter_command, ingest.encoding) as stream:
            yield tokenize_lines(stream, tokenizer)


__all__ = ["check_filter_command", "iter_units", "open_source", "open_stdin", "render_filter_command"]
