"""Quickstart: build a chain from a few paragraphs and print two articles."""

from __future__ import annotations

import sys

from newsbabble import Generator, NumpyRandomSource, build_model
from newsbabble.diagnostics import diagnose
from newsbabble.logging import configure_logging
from newsbabble.output import LineWrapper, write_articles
from newsbabble.tokenizer import tokenize_text

ARTICLES = [
    """\
I think the new compiler is a big improvement over the old one. It was
a long time coming, but the code it generates is much faster.

Has anyone else tried it on a VAX?
""",
    """\
The old compiler was fine for most of what I do. The new one is a big
improvement only if you care about the code it generates.
""",
    """\
Has anyone else noticed that the net is getting slower? I think the
backbone sites are a big part of the problem.
""",
]


def main() -> None:
    configure_logging()
    model = build_model(tokenize_text(text) for text in ARTICLES)
    report = diagnose(model)
    print(f"Built model: {report.stats.to_dict()}")

    generator = Generator(model, NumpyRandomSource(seed=1987))
    sink = LineWrapper(sys.stdout)
    write_articles(generator, sink, count=2)


if __name__ == "__main__":
    main()
