"""Exceptions raised by newsbabble."""

from __future__ import annotations


class BabbleError(Exception):
    """Base class for newsbabble errors."""


class EmptyModelError(BabbleError):
    """Generation was requested before any input unit was ingested."""


class EmptyChainError(BabbleError):
    """A weighted draw was attempted on a successor chain without edges."""


class ModelIntegrityError(BabbleError):
    """The model violates one of its counting invariants."""

    def __init__(self, violations: list) -> None:
        self.violations = list(violations)
        summary = "; ".join(str(violation) for violation in self.violations[:5])
        if len(self.violations) > 5:
            summary += f"; ... ({len(self.violations) - 5} more)"
        super().__init__(summary)


class SourceError(BabbleError):
    """An input source could not be opened or filtered."""


__all__ = [
    "BabbleError",
    "EmptyChainError",
    "EmptyModelError",
    "ModelIntegrityError",
    "SourceError",
]
