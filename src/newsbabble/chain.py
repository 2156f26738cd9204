"""Weighted successor chains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .errors import EmptyChainError

StateHandle = int

# Edge target marking the end of an input unit.
TERMINAL: Optional[StateHandle] = None


@dataclass
class Edge:
    """Observed transition to ``target`` (a state handle or ``TERMINAL``)."""

    target: Optional[StateHandle]
    count: int = 1

    @property
    def is_terminal(self) -> bool:
        return self.target is TERMINAL


class SuccessorChain:
    """Ordered list of outgoing edges with insert-or-increment semantics.

    Edges keep first-seen order, which decides ties during weighted selection.
    """

    __slots__ = ("_edges", "_positions")

    def __init__(self) -> None:
        self._edges: List[Edge] = []
        self._positions: Dict[Optional[StateHandle], int] = {}

    def add(self, target: Optional[StateHandle]) -> Edge:
        position = self._positions.get(target)
        if position is not None:
            edge = self._edges[position]
            edge.count += 1
            return edge
        edge = Edge(target=target)
        self._positions[target] = len(self._edges)
        self._edges.append(edge)
        return edge

    def get(self, target: Optional[StateHandle]) -> Optional[Edge]:
        position = self._positions.get(target)
        return None if position is None else self._edges[position]

    @property
    def total(self) -> int:
        return sum(edge.count for edge in self._edges)

    def select(self, draw: int) -> Edge:
        """Return the first edge whose running count exceeds ``draw``.

        The last edge is returned when the counts never exceed ``draw``.
        """
        if not self._edges:
            raise EmptyChainError("cannot select from a chain without edges")
        accumulated = 0
        for edge in self._edges:
            accumulated += edge.count
            if accumulated > draw:
                return edge
        return self._edges[-1]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __bool__(self) -> bool:
        return bool(self._edges)

    def __repr__(self) -> str:
        return f"SuccessorChain({self._edges!r})"


__all__ = ["Edge", "StateHandle", "SuccessorChain", "TERMINAL"]
