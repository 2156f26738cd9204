"""Line-wrapped output of generated articles."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, TextIO

from .generator import Generator

DEFAULT_MARGIN = 75
ARTICLE_SEPARATOR = "\n\f\n"


class LineWrapper:
    """Buffer words into lines of at most ``margin`` characters.

    A word that does not fit, or that starts with a newline, flushes the
    pending line first. Words starting with a newline (paragraph breaks,
    separators) are written through as is; words as wide as the margin get a
    line of their own.
    """

    def __init__(self, stream: TextIO, margin: int = DEFAULT_MARGIN) -> None:
        if margin < 1:
            raise ValueError(f"margin must be positive, got {margin}")
        self.stream = stream
        self.margin = margin
        self._words: list[str] = []
        self._room = margin

    def write(self, word: Optional[str]) -> None:
        if word is None:
            return
        length = len(word)
        starts_line = word.startswith("\n")
        if self._words and (length >= self._room or starts_line):
            self.flush()
        if starts_line:
            self.stream.write(word)
        elif length >= self.margin:
            self.stream.write(word + "\n")
        else:
            self._words.append(word)
            self._room -= length + 1

    def write_all(self, words: Iterable[str]) -> None:
        for word in words:
            self.write(word)

    def flush(self) -> None:
        """Write out the pending line, if any."""
        if self._words:
            self.stream.write(" ".join(self._words) + "\n")
            self._words = []
            self._room = self.margin

    def end_sequence(self) -> None:
        self.write("\n")

    def separator(self, text: str = ARTICLE_SEPARATOR) -> None:
        """Write ``text`` verbatim on a fresh line."""
        self.flush()
        self.stream.write(text)


def write_articles(
    generator: Generator,
    sink: LineWrapper,
    count: int,
    separator: str = ARTICLE_SEPARATOR,
) -> int:
    """Generate ``count`` articles into ``sink``; return the number of tokens written."""
    written = 0
    for index, words in enumerate(generator.generate(count)):
        if index > 0:
            sink.separator(separator)
        sink.write_all(words)
        sink.end_sequence()
        written += len(words)
    return written


__all__ = ["ARTICLE_SEPARATOR", "DEFAULT_MARGIN", "LineWrapper", "write_articles"]
