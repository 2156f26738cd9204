"""Utility helpers shared across the newsbabble package."""

from .io import load_yaml_or_json, save_json, save_yaml_or_json
from .random import deterministic_hash, make_rng, resolve_seed

__all__ = [
    "deterministic_hash",
    "load_yaml_or_json",
    "make_rng",
    "resolve_seed",
    "save_json",
    "save_yaml_or_json",
]
