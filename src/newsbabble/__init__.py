"""Simulated news articles from a second-order Markov chain."""

from .chain import TERMINAL, Edge, SuccessorChain
from .config import BabbleConfig, load_config
from .errors import BabbleError, EmptyModelError, ModelIntegrityError, SourceError
from .generator import Generator, NumpyRandomSource, RandomSource
from .ingest import Ingestor, build_model
from .interner import NULL_TOKEN, TokenId, TokenInterner
from .model import ChainModel, ModelStats
from .pair_index import PairIndex, State

__all__ = [
    "BabbleConfig",
    "BabbleError",
    "ChainModel",
    "Edge",
    "EmptyModelError",
    "Generator",
    "Ingestor",
    "ModelIntegrityError",
    "ModelStats",
    "NULL_TOKEN",
    "NumpyRandomSource",
    "PairIndex",
    "RandomSource",
    "SourceError",
    "State",
    "SuccessorChain",
    "TERMINAL",
    "TokenId",
    "TokenInterner",
    "build_model",
    "load_config",
]

__version__ = "0.1.0"
