"""Weighted random walks over a built :class:`ChainModel`."""

from __future__ import annotations

from collections.abc import Iterator
from typing import List, Optional, Protocol

import numpy as np

from .errors import EmptyModelError
from .logging import get_logger
from .model import ChainModel
from .utils.random import make_rng

LOGGER = get_logger(__name__)


class RandomSource(Protocol):
    def randbelow(self, bound: int) -> int:
        """Return a uniformly distributed integer in ``[0, bound)``."""
        ...


class NumpyRandomSource:
    """:class:`RandomSource` backed by a NumPy ``Generator``."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else make_rng(seed)

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self.rng.integers(0, bound))


class Generator:
    """Generate token sequences from a read-only model.

    Each call to :meth:`generate_one` keeps its own cursor and weight bound, so
    sequences are independent of one another.
    """

    def __init__(self, model: ChainModel, random_source: Optional[RandomSource] = None) -> None:
        self.model = model
        self.random = random_source if random_source is not None else NumpyRandomSource()

    def generate_one(self) -> List[str]:
        model = self.model
        if model.is_empty:
            raise EmptyModelError("no input units were ingested")
        chain = model.start
        weight_bound = model.units
        emitted: List[str] = []
        while True:
            # Roll the dice: pick the next state with probability
            # proportional to how often the transition was observed.
            edge = chain.select(self.random.randbelow(weight_bound))
            if edge.is_terminal:
                break
            state = model.pairs[edge.target]
            text = model.token_text(state)
            if text is None:
                break
            emitted.append(text)
            weight_bound = state.count
            chain = state.successors
        LOGGER.debug("Generated sequence of %d tokens", len(emitted))
        return emitted

    def generate(self, count: int) -> Iterator[List[str]]:
        for _ in range(count):
            yield self.generate_one()


__all__ = ["Generator", "NumpyRandomSource", "RandomSource"]
