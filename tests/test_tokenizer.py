import io

import pytest

from newsbabble.config import TokenizerConfig
from newsbabble.tokenizer import PARAGRAPH_BREAK, filter_article, tokenize, tokenize_text


def test_splits_on_any_whitespace() -> None:
    assert tokenize_text("one  way\tto\n go") == ["one", "way", "to", "go"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\nb", ["a", "b"]),
        ("a\n\nb", ["a", PARAGRAPH_BREAK, "b"]),
        ("a\n\n\n\nb", ["a", PARAGRAPH_BREAK, "b"]),
        ("a\n \nb", ["a", "b"]),
        ("a\n\n", ["a", PARAGRAPH_BREAK]),
        ("\n\na", [PARAGRAPH_BREAK, "a"]),
        ("\na", ["a"]),
        ("", []),
    ],
)
def test_paragraph_breaks(text: str, expected: list[str]) -> None:
    assert tokenize_text(text) == expected


def test_long_tokens_are_truncated() -> None:
    word = "x" * 300
    assert tokenize_text(word) == ["x" * 256]
    assert tokenize_text(word, TokenizerConfig(max_token_length=10)) == ["x" * 10]


def test_tokenize_reads_lazily() -> None:
    stream = io.StringIO("first line\nsecond line\n")
    tokens = tokenize(stream)
    assert next(tokens) == "first"
    assert stream.tell() > 0


ARTICLE = """\
From: someone@example.com
Subject: Re: markov chains
Newsgroups: comp.misc

In article <1@example.com> you write:
> quoted opinion
> more quoted opinion

I disagree entirely.

--\x20
Someone
"""


def test_filter_article_drops_header_quotes_and_signature() -> None:
    kept = list(filter_article(io.StringIO(ARTICLE)))
    assert kept == [
        "In article <1@example.com> you write:\n",
        "\n",
        "I disagree entirely.\n",
        "\n",
    ]


def test_news_filter_applies_only_when_enabled() -> None:
    filtered = tokenize_text(ARTICLE, TokenizerConfig(news_filter=True))
    assert "Subject:" not in filtered
    assert "opinion" not in filtered
    assert "Someone" not in filtered
    assert filtered[-5:] == [PARAGRAPH_BREAK, "I", "disagree", "entirely.", PARAGRAPH_BREAK]
    assert "Subject:" in tokenize_text(ARTICLE)


def test_body_without_header_is_kept() -> None:
    text = "Plain text: not a header because of the space\nsecond\n"
    assert list(filter_article(io.StringIO(text))) == text.splitlines(keepends=True)
