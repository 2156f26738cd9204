"""The chain model: interned tokens, pair states and successor chains."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .chain import Edge, SuccessorChain
from .errors import ModelIntegrityError
from .interner import TokenInterner
from .logging import get_logger
from .pair_index import PairIndex, State

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ModelStats:
    units: int
    tokens: int
    distinct_tokens: int
    distinct_pairs: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class ChainModel:
    """Owns every structure built during ingestion and read during generation."""

    def __init__(self, progress_interval: Optional[int] = None) -> None:
        self.progress_interval = progress_interval
        self.tokens = TokenInterner()
        self.pairs = PairIndex(on_new_pair=self._report_progress)
        self.start = SuccessorChain()
        self.units = 0

    def _report_progress(self, state: State) -> None:
        interval = self.progress_interval
        if interval and (state.handle + 1) % interval == 0:
            LOGGER.info("%d pairs", state.handle + 1)

    def add_edge(self, source: Optional[State], target: Optional[State]) -> Edge:
        """Record a transition; ``source=None`` is the start chain, ``target=None`` the terminal."""
        chain = self.start if source is None else source.successors
        return chain.add(None if target is None else target.handle)

    def token_text(self, state: State) -> Optional[str]:
        if state.current is None:
            return None
        return self.tokens.text(state.current)

    def stats(self) -> ModelStats:
        return ModelStats(
            units=self.units,
            tokens=self.tokens.lookups,
            distinct_tokens=len(self.tokens),
            distinct_pairs=len(self.pairs),
        )

    def validate(self) -> None:
        """Raise :class:`ModelIntegrityError` if any counting invariant is broken."""
        from .diagnostics import diagnose

        report = diagnose(self)
        if not report.ok:
            raise ModelIntegrityError(report.violations)

    def clear(self) -> None:
        self.tokens.clear()
        self.pairs.clear()
        self.start = SuccessorChain()
        self.units = 0

    @property
    def is_empty(self) -> bool:
        return self.units == 0 or not self.start

    def __repr__(self) -> str:
        stats = self.stats()
        return (
            f"ChainModel(units={stats.units}, distinct_tokens={stats.distinct_tokens}, "
            f"distinct_pairs={stats.distinct_pairs})"
        )


__all__ = ["ChainModel", "ModelStats"]
