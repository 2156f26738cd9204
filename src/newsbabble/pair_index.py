"""Ordered index of token pairs (the states of the chain)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from .chain import StateHandle, SuccessorChain
from .interner import TokenId

_NIL = -1

PairKey = Tuple[int, int]
PairObserver = Callable[["State"], None]


def pair_key(previous: Optional[TokenId], current: Optional[TokenId]) -> PairKey:
    """Sort key for a pair; the null token sorts before every real token."""
    return (_NIL if previous is None else previous, _NIL if current is None else current)


@dataclass
class State:
    """The pair ``(previous, current)`` together with its outgoing edges."""

    handle: StateHandle
    previous: Optional[TokenId]
    current: Optional[TokenId]
    count: int = 1
    successors: SuccessorChain = field(default_factory=SuccessorChain, repr=False)

    @property
    def key(self) -> PairKey:
        return pair_key(self.previous, self.current)


class PairIndex:
    """Binary search tree of states, stored as an arena addressed by handle.

    Insertion is iterative and does no rebalancing, so a pathological insertion
    order degrades lookups to linear time.
    """

    def __init__(self, on_new_pair: Optional[PairObserver] = None) -> None:
        self._states: List[State] = []
        self._left: List[int] = []
        self._right: List[int] = []
        self.on_new_pair = on_new_pair

    def insert(self, previous: Optional[TokenId], current: Optional[TokenId]) -> State:
        """Count one observation of the pair, creating its state if needed."""
        key = pair_key(previous, current)
        if not self._states:
            return self._allocate(previous, current)
        handle = 0
        while True:
            state = self._states[handle]
            node_key = state.key
            if key == node_key:
                state.count += 1
                return state
            branch = self._left if key < node_key else self._right
            child = branch[handle]
            if child == _NIL:
                created = self._allocate(previous, current)
                branch[handle] = created.handle
                return created
            handle = child

    def find(self, previous: Optional[TokenId], current: Optional[TokenId]) -> Optional[State]:
        key = pair_key(previous, current)
        handle = 0 if self._states else _NIL
        while handle != _NIL:
            state = self._states[handle]
            node_key = state.key
            if key == node_key:
                return state
            handle = self._left[handle] if key < node_key else self._right[handle]
        return None

    def _allocate(self, previous: Optional[TokenId], current: Optional[TokenId]) -> State:
        state = State(handle=len(self._states), previous=previous, current=current)
        self._states.append(state)
        self._left.append(_NIL)
        self._right.append(_NIL)
        if self.on_new_pair is not None:
            self.on_new_pair(state)
        return state

    def depth(self) -> int:
        """Height of the tree, 0 when empty."""
        if not self._states:
            return 0
        deepest = 0
        stack = [(0, 1)]
        while stack:
            handle, level = stack.pop()
            deepest = max(deepest, level)
            for child in (self._left[handle], self._right[handle]):
                if child != _NIL:
                    stack.append((child, level + 1))
        return deepest

    def clear(self) -> None:
        self._states.clear()
        self._left.clear()
        self._right.clear()

    def __getitem__(self, handle: StateHandle) -> State:
        return self._states[handle]

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        """Yield states in key order."""
        stack: List[int] = []
        handle = 0 if self._states else _NIL
        while stack or handle != _NIL:
            while handle != _NIL:
                stack.append(handle)
                handle = self._left[handle]
            handle = stack.pop()
            yield self._states[handle]
            handle = self._right[handle]


__all__ = ["PairIndex", "PairKey", "State", "pair_key"]
