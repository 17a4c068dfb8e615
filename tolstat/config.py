"""Validated analysis parameters shared by the interval procedures."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidConfigError


def _check_open_unit(name: str, value: float) -> float:
    v = float(value)
    if not (math.isfinite(v) and 0.0 < v < 1.0):
        raise InvalidConfigError(f"{name} must lie in (0, 1), got {value!r}")
    return v


def validate_alpha(alpha: float) -> float:
    """Return ``alpha`` as a float, raising unless it lies in the open unit interval."""
    return _check_open_unit("alpha", alpha)


def validate_coverage(coverage: float) -> float:
    """Return ``coverage`` as a float, raising unless it lies in (0, 1)."""
    return _check_open_unit("coverage", coverage)


def validate_margin(margin: float) -> float:
    """Return the equivalence margin, raising unless it is finite and positive."""
    m = float(margin)
    if not (math.isfinite(m) and m > 0.0):
        raise InvalidConfigError(f"margin must be finite and > 0, got {margin!r}")
    return m


@dataclass(frozen=True)
class AnalysisConfig:
    """Immutable parameter set for one analysis.

    Attributes:
        alpha: Nominal two-sided significance level (1 - confidence) for the
            confidence interval; carried through to the tolerance interval and
            equivalence test.
        coverage: Target population proportion for the tolerance interval.
        margin: Symmetric equivalence bound (the test is against +/- margin).

    Values are checked on construction, so an ``AnalysisConfig`` that exists is
    always valid.
    """

    alpha: float
    coverage: float
    margin: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", validate_alpha(self.alpha))
        object.__setattr__(self, "coverage", validate_coverage(self.coverage))
        object.__setattr__(self, "margin", validate_margin(self.margin))
