"""Predefined ingestion and generation pipelines."""

from .workflows import babble, build_from_sources

__all__ = ["babble", "build_from_sources"]
