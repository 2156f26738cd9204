from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from newsbabble.config import BabbleConfig
from newsbabble.ingest import build_model
from newsbabble.model import ChainModel


class ScriptedRandom:
    """Random source replaying ``draws``, then repeating ``default``."""

    def __init__(self, draws: list[int] | None = None, default: int = 0) -> None:
        self.draws = list(draws or [])
        self.default = default
        self.bounds: list[int] = []

    def randbelow(self, bound: int) -> int:
        self.bounds.append(bound)
        value = self.draws.pop(0) if self.draws else self.default
        assert 0 <= value < bound
        return value


@pytest.fixture
def config() -> BabbleConfig:
    return BabbleConfig()


@pytest.fixture
def workspace(tmp_path: Path) -> Iterator[Path]:
    yield tmp_path


@pytest.fixture
def two_unit_model() -> ChainModel:
    return build_model([["a", "b", "a"], ["a", "b", "c"]])


@pytest.fixture
def first_choice() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
