"""Custom exceptions for interval computations."""

from __future__ import annotations


class TolstatError(ValueError):
    """Raised when an interval or equivalence computation cannot be completed."""


class InvalidConfigError(TolstatError):
    """Raised when alpha, coverage, or the equivalence margin is out of range."""


class InsufficientDataError(TolstatError):
    """Raised when a sample has too few observations for the requested statistic."""

    def __init__(self, n: int, required: int = 2) -> None:
        self.n = int(n)
        self.required = int(required)
        super().__init__(
            f"Sample has {self.n} observation(s); at least {self.required} required."
        )


class NonFiniteDataError(TolstatError):
    """Raised when a sample or a statistic derived from it is NaN or infinite."""
