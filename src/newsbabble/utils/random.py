"""Randomness helpers for reproducible generation."""

from __future__ import annotations

import hashlib
import os
from typing import Optional

import numpy as np

SEED_ENV_VAR = "NEWSBABBLE_SEED"


def deterministic_hash(value: str) -> int:
    """Return a deterministic integer hash for ``value``."""
    digest = hashlib.sha256(value.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)


def resolve_seed(seed: Optional[int] = None) -> Optional[int]:
    """Return ``seed``, falling back to ``$NEWSBABBLE_SEED`` when it is set.

    Non-numeric environment values are hashed so any string works as a seed.
    """
    if seed is not None:
        return seed
    raw = os.getenv(SEED_ENV_VAR)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return deterministic_hash(raw) % (2**32)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build a NumPy generator; unseeded generators draw from OS entropy."""
    return np.random.default_rng(resolve_seed(seed))
