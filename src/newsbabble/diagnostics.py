"""Consistency checks and summary reports for a built model."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .chain import SuccessorChain
from .logging import get_logger
from .model import ChainModel, ModelStats
from .utils.io import save_json

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class InvariantViolation:
    source: Optional[int]
    kind: str
    expected: int
    actual: int

    def __str__(self) -> str:
        where = "start chain" if self.source is None else f"state {self.source}"
        return f"{where}: {self.kind} expected {self.expected}, got {self.actual}"

    def to_dict(self) -> Dict[str, object]:
        return {"source": self.source, "kind": self.kind, "expected": self.expected, "actual": self.actual}


@dataclass
class ModelReport:
    stats: ModelStats
    edges: int
    terminal_edges: int
    tree_depth: int
    violations: List[InvariantViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def to_dict(self) -> Dict[str, object]:
        return {
            "stats": self.stats.to_dict(),
            "edges": self.edges,
            "terminal_edges": self.terminal_edges,
            "tree_depth": self.tree_depth,
            "ok": self.ok,
            "violations": [violation.to_dict() for violation in self.violations],
        }

    def to_json(self, path: Path) -> None:
        save_json(Path(path), self.to_dict())

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def _check_chain(chain: SuccessorChain, source: Optional[int], expected_total: int) -> List[InvariantViolation]:
    violations = []
    total = chain.total
    if total != expected_total:
        violations.append(InvariantViolation(source, "edge count total", expected_total, total))
    distinct = len({edge.target for edge in chain})
    if distinct != len(chain):
        violations.append(InvariantViolation(source, "distinct edge targets", len(chain), distinct))
    return violations


def diagnose(model: ChainModel) -> ModelReport:
    """Check that every chain's edge counts add up to its source's weight.

    The start chain must total the number of ingested units and every state's
    chain must total that state's occurrence count; generation draws against
    exactly those bounds.
    """
    violations = _check_chain(model.start, None, model.units)
    edges = len(model.start)
    terminal_edges = sum(1 for edge in model.start if edge.is_terminal)
    for state in model.pairs:
        violations.extend(_check_chain(state.successors, state.handle, state.count))
        edges += len(state.successors)
        terminal_edges += sum(1 for edge in state.successors if edge.is_terminal)
    if violations:
        LOGGER.warning("Model has %d invariant violations", len(violations))
    return ModelReport(
        stats=model.stats(),
        edges=edges,
        terminal_edges=terminal_edges,
        tree_depth=model.pairs.depth(),
        violations=violations,
    )


__all__ = ["InvariantViolation", "ModelReport", "diagnose"]
