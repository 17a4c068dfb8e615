"""Location and spread of a one-dimensional sample."""

from __future__ import annotations

import math

import numpy as np

from ..errors import InsufficientDataError, NonFiniteDataError


def _as_sample(sample) -> np.ndarray:
    arr = np.asarray(sample, dtype=float).ravel()
    if not np.isfinite(arr).all():
        raise NonFiniteDataError("Sample contains NaN or infinite values.")
    return arr


def _require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise NonFiniteDataError(
            f"Sample {name} overflows double precision ({value!r})."
        )
    return value


def sample_mean(sample) -> float:
    """Return the arithmetic mean (sum divided by n).

    Raises:
        InsufficientDataError: If the sample is empty.
        NonFiniteDataError: If the sample holds NaN/inf or the sum overflows.
    """
    arr = _as_sample(sample)
    n = int(len(arr))
    if n < 1:
        raise InsufficientDataError(n, required=1)
    with np.errstate(over="ignore", invalid="ignore"):
        total = float(np.sum(arr))
    return _require_finite("mean", total / n)


def sample_std(sample) -> float:
    """Return the Bessel-corrected sample standard deviation.

    Args:
        sample (array-like): Observations in any consistent unit.

    Returns:
        float: ``sqrt(sum((x - mean)**2) / (n - 1))`` in the unit of the
        sample. Exactly ``0.0`` for a constant sample.

    Raises:
        InsufficientDataError: If fewer than two observations are given.
        NonFiniteDataError: If the sample holds NaN/inf or the squared
            deviations overflow.
    """
    arr = _as_sample(sample)
    n = int(len(arr))
    if n < 2:
        raise InsufficientDataError(n, required=2)
    m = sample_mean(arr)
    with np.errstate(over="ignore", invalid="ignore"):
        ss = float(np.sum((arr - m) ** 2))
    return _require_finite("standard deviation", float(np.sqrt(ss / (n - 1))))
