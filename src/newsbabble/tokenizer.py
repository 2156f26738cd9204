"""Split raw article text into tokens.

A token is a maximal run of non-blank characters. A run of two or more
newlines (a blank line) becomes the single token :data:`PARAGRAPH_BREAK`, so
paragraph structure survives generation.
"""

from __future__ import annotations

import io
import re
from collections.abc import Iterable, Iterator

from .config import TokenizerConfig

PARAGRAPH_BREAK = "\n"
SIGNATURE_DELIMITER = "-- "

_HEADER_RE = re.compile(r"^(From |[A-Za-z][A-Za-z0-9-]*:(\s|$))")


def filter_article(lines: Iterable[str]) -> Iterator[str]:
    """Drop the header block, quoted text and signature of a news article.

    The header is recognised only when the very first line looks like a header
    field and extends to the first blank line.
    """
    in_header = None
    for line in lines:
        if in_header is None:
            in_header = bool(_HEADER_RE.match(line))
        if in_header:
            if not line.strip():
                in_header = False
            continue
        body = line.rstrip("\r\n")
        if body == SIGNATURE_DELIMITER:
            return
        if body.startswith(">"):
            continue
        yield line


def tokenize(lines: Iterable[str], max_token_length: int = 256) -> Iterator[str]:
    """Yield the tokens of ``lines`` (which keep their line endings)."""
    newline_run = 0
    for line in lines:
        if line == "\n":
            newline_run += 1
            continue
        if newline_run >= 2:
            yield PARAGRAPH_BREAK
        for word in line.split():
            yield word[:max_token_length]
        newline_run = 1 if line.endswith("\n") else 0
    if newline_run >= 2:
        yield PARAGRAPH_BREAK


def tokenize_lines(lines: Iterable[str], config: TokenizerConfig | None = None) -> Iterator[str]:
    """Tokenize ``lines`` according to ``config``."""
    config = config or TokenizerConfig()
    if config.news_filter:
        lines = filter_article(lines)
    return tokenize(lines, max_token_length=config.max_token_length)


def tokenize_text(text: str, config: TokenizerConfig | None = None) -> list[str]:
    return list(tokenize_lines(io.StringIO(text), config))


__all__ = [
    "PARAGRAPH_BREAK",
    "filter_article",
    "tokenize",
    "tokenize_lines",
    "tokenize_text",
]
