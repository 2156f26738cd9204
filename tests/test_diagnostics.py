import json
from pathlib import Path

from newsbabble.diagnostics import diagnose
from newsbabble.ingest import build_model
from newsbabble.model import ChainModel
from newsbabble.tokenizer import tokenize_text

CORPUS = [
    "It was a dark and stormy night.\n\nThe rain fell in torrents, except at occasional intervals.\n",
    "It was the best of times, it was the worst of times.\n",
    "",
    "night\n",
]


def test_real_corpus_satisfies_invariants() -> None:
    model = build_model(tokenize_text(text) for text in CORPUS)
    report = diagnose(model)
    assert report.ok, report.violations
    assert report.stats.units == 4
    assert report.terminal_edges >= 3
    assert report.tree_depth >= 1


def test_broken_counts_are_reported(two_unit_model: ChainModel) -> None:
    two_unit_model.units += 1
    report = diagnose(two_unit_model)
    assert not report.ok
    violation = report.violations[0]
    assert violation.source is None
    assert (violation.expected, violation.actual) == (3, 2)
    assert "start chain" in str(violation)


def test_report_serialises(two_unit_model: ChainModel, workspace: Path) -> None:
    report = diagnose(two_unit_model)
    payload = report.to_dict()
    assert payload["stats"]["distinct_pairs"] == 4
    assert payload["edges"] == 6
    assert payload["terminal_edges"] == 2
    path = workspace / "report.json"
    report.to_json(path)
    assert json.loads(path.read_text()) == payload
