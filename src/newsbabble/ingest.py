"""Drive token streams into a :class:`ChainModel`."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .interner import TokenId
from .logging import get_logger
from .model import ChainModel
from .pair_index import State

LOGGER = get_logger(__name__)


class Ingestor:
    """Feeds tokens into the model one input unit at a time.

    Say the previous two tokens were "one" "way" and the next is "to". The
    cursor points at the state ("one", "way"); feeding "to" records ("way",
    "to") as its successor and moves the cursor there. Ending a unit records a
    terminal edge and resets the cursor, so every unit starts from the start
    chain.
    """

    def __init__(self, model: ChainModel) -> None:
        self.model = model
        self.previous_token: Optional[TokenId] = None
        self.previous_state: Optional[State] = None
        self._in_unit = False

    def begin_unit(self) -> None:
        if self._in_unit:
            raise RuntimeError("begin_unit called twice without end_unit")
        self.previous_token = None
        self.previous_state = None
        self._in_unit = True

    def feed(self, text: str) -> State:
        if not self._in_unit:
            raise RuntimeError("feed called outside of an input unit")
        model = self.model
        token = model.tokens.intern(text)
        state = model.pairs.insert(self.previous_token, token)
        model.add_edge(self.previous_state, state)
        self.previous_state = state
        self.previous_token = token
        return state

    def end_unit(self) -> None:
        if not self._in_unit:
            raise RuntimeError("end_unit called outside of an input unit")
        self.model.add_edge(self.previous_state, None)
        self.previous_state = None
        self.previous_token = None
        self.model.units += 1
        self._in_unit = False

    def ingest_unit(self, tokens: Iterable[str]) -> None:
        """Ingest one unit.

        If ``tokens`` raises part way through, the tokens already fed are kept
        and the unit is closed before the error propagates, so the model stays
        consistent and the next unit starts cleanly.
        """
        self.begin_unit()
        try:
            for token in tokens:
                self.feed(token)
        finally:
            self.end_unit()

    def ingest(self, units: Iterable[Iterable[str]]) -> ChainModel:
        for tokens in units:
            self.ingest_unit(tokens)
        stats = self.model.stats()
        LOGGER.info(
            "%d units %d tokens (%d different) %d different pairs",
            stats.units,
            stats.tokens,
            stats.distinct_tokens,
            stats.distinct_pairs,
        )
        return self.model


def build_model(units: Iterable[Iterable[str]], progress_interval: Optional[int] = None) -> ChainModel:
    """Ingest ``units`` into a fresh model and return it."""
    return Ingestor(ChainModel(progress_interval=progress_interval)).ingest(units)


__all__ = ["Ingestor", "build_model"]
