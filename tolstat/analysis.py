"""
Confidence interval, tolerance interval and TOST equivalence for one sample.

This module estimates, from a sample of n >= 2 observations:
- A confidence interval for the mean: m ± t·s/√n, with t from the tabulated
  critical values (normal fallback 1.96 for untabulated n).
- A normal tolerance interval: m ± k·s, with the approximate k-factor.
- A Two-One-Sided-Tests equivalence verdict against [-margin, +margin]:
    tLow = (m + margin)/se, tHigh = (margin - m)/se, se = s/√n,
  declared equivalent when both exceed the fixed threshold 1.96.

The TOST threshold and its reported bounds use 1.96 regardless of the alpha
passed in. For alpha != 0.05 the verdict therefore does not match the
configured level.

All procedures are pure: they validate their scalar arguments, require
n >= 2, and either return a complete result record or raise.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd

from .config import (
    AnalysisConfig,
    validate_alpha,
    validate_coverage,
    validate_margin,
)
from .errors import InsufficientDataError, NonFiniteDataError
from .schema import (
    AnalysisResult,
    ConfidenceIntervalResult,
    ResultColumns,
    TOSTResult,
    ToleranceIntervalResult,
)
from .stats import (
    CriticalValueProvider,
    critical_value,
    k_factor,
    sample_mean,
    sample_std,
)

logger = logging.getLogger(__name__)

TOST_CRITICAL = 1.96
MIN_SAMPLE_SIZE = 2


def _require_sample(sample) -> np.ndarray:
    arr = np.asarray(sample, dtype=float).ravel()
    if len(arr) < MIN_SAMPLE_SIZE:
        raise InsufficientDataError(len(arr), required=MIN_SAMPLE_SIZE)
    if not np.isfinite(arr).all():
        raise NonFiniteDataError("Sample contains NaN or infinite values.")
    return arr


def _divide(numerator: float, denominator: float) -> float:
    # IEEE semantics: x/0 -> ±inf, 0/0 -> nan (and nan > c is False).
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def compute_confidence_interval(
    sample,
    alpha: float,
    provider: Optional[CriticalValueProvider] = None,
) -> ConfidenceIntervalResult:
    """Compute a two-sided confidence interval for the population mean.

    Args:
        sample (array-like): Observations; at least two are required.
        alpha (float): Significance level in (0, 1).
        provider (CriticalValueProvider, optional): Critical-value source.

    Returns:
        ConfidenceIntervalResult: ``[m - t·s/√n, m + t·s/√n]``. Collapses to
        ``[m, m]`` for a constant sample.

    Raises:
        InvalidConfigError: If ``alpha`` is outside (0, 1).
        InsufficientDataError: If fewer than two observations are given.
        NonFiniteDataError: If the sample holds NaN/inf or its mean or
            standard deviation overflows.
    """
    alpha = validate_alpha(alpha)
    arr = _require_sample(sample)
    n = len(arr)

    m = sample_mean(arr)
    s = sample_std(arr)
    t = critical_value(n, alpha, provider=provider)
    half_width = t * s / math.sqrt(n)
    return ConfidenceIntervalResult(lower=m - half_width, upper=m + half_width)


def compute_tolerance_interval(
    sample,
    alpha: float,
    coverage: float,
    provider: Optional[CriticalValueProvider] = None,
) -> ToleranceIntervalResult:
    """Compute an approximate normal tolerance interval ``m ± k·s``.

    For the same sample and alpha the result is never narrower than the
    confidence interval, since ``k >= t/√n`` for every n >= 2.

    Raises:
        InvalidConfigError: If ``alpha`` or ``coverage`` is outside (0, 1).
        InsufficientDataError: If fewer than two observations are given.
        NonFiniteDataError: If the sample holds NaN/inf or its mean or
            standard deviation overflows.
    """
    alpha = validate_alpha(alpha)
    coverage = validate_coverage(coverage)
    arr = _require_sample(sample)
    n = len(arr)

    m = sample_mean(arr)
    s = sample_std(arr)
    k = k_factor(n, alpha, coverage, provider=provider)
    return ToleranceIntervalResult(lower=m - k * s, upper=m + k * s)


def compute_tost_equivalence(sample, margin: float, alpha: float) -> TOSTResult:
    """Test whether the population mean lies within ``[-margin, +margin]``.

    Args:
        sample (array-like): Observations; at least two are required.
        margin (float): Positive equivalence bound.
        alpha (float): Significance level in (0, 1). Validated but not used:
            both the decision threshold and the reported bounds use the fixed
            multiplier ``TOST_CRITICAL`` (1.96).

    Returns:
        TOSTResult: Verdict, ``m ∓ 1.96·se`` bounds and the sample mean.

    Raises:
        InvalidConfigError: If ``margin <= 0`` or ``alpha`` is outside (0, 1).
        InsufficientDataError: If fewer than two observations are given.
        NonFiniteDataError: If the sample holds NaN/inf or its mean or
            standard deviation overflows.

    Note:
        A constant sample has ``se == 0``; the statistics then become infinite
        (equivalent iff the mean lies strictly inside the margin) rather than
        raising ``ZeroDivisionError``.
    """
    margin = validate_margin(margin)
    validate_alpha(alpha)
    arr = _require_sample(sample)
    n = len(arr)

    m = sample_mean(arr)
    s = sample_std(arr)
    se = s / math.sqrt(n)

    t_low = _divide(m + margin, se)
    t_high = _divide(margin - m, se)
    equivalent = bool(t_low > TOST_CRITICAL and t_high > TOST_CRITICAL)

    return TOSTResult(
        equivalent=equivalent,
        lower=m - TOST_CRITICAL * se,
        upper=m + TOST_CRITICAL * se,
        mean=m,
    )


def analyze_sample(
    sample,
    config: AnalysisConfig,
    *,
    run_ci: bool = True,
    run_ti: bool = True,
    run_tost: bool = True,
    provider: Optional[CriticalValueProvider] = None,
) -> AnalysisResult:
    """Run the selected procedures on one sample.

    The sample size is checked once up front, so a short sample raises before
    any procedure runs and no partial result is returned.
    """
    arr = _require_sample(sample)
    logger.info(
        "Analyzing sample: n=%d, alpha=%.4g, coverage=%.4g, margin=%.4g",
        len(arr),
        config.alpha,
        config.coverage,
        config.margin,
    )

    ci = ti = tost = None
    if run_ci:
        ci = compute_confidence_interval(arr, config.alpha, provider=provider)
        logger.info("Confidence interval: [%.6g, %.6g]", ci.lower, ci.upper)
    if run_ti:
        ti = compute_tolerance_interval(
            arr, config.alpha, config.coverage, provider=provider
        )
        logger.info("Tolerance interval: [%.6g, %.6g]", ti.lower, ti.upper)
    if run_tost:
        tost = compute_tost_equivalence(arr, config.margin, config.alpha)
        logger.info("TOST equivalent=%s (mean=%.6g)", tost.equivalent, tost.mean)

    return AnalysisResult(
        sample=arr,
        config=config,
        confidence_interval=ci,
        tolerance_interval=ti,
        tost=tost,
    )


def create_results_dataframe(result: AnalysisResult) -> pd.DataFrame:
    cols = ResultColumns()
    mean = sample_mean(result.sample)
    rows = []
    if result.confidence_interval is not None:
        rows.append(
            {
                cols.procedure: "CI",
                cols.lower: result.confidence_interval.lower,
                cols.upper: result.confidence_interval.upper,
                cols.mean: mean,
                cols.equivalent: None,
            }
        )
    if result.tolerance_interval is not None:
        rows.append(
            {
                cols.procedure: "TI",
                cols.lower: result.tolerance_interval.lower,
                cols.upper: result.tolerance_interval.upper,
                cols.mean: mean,
                cols.equivalent: None,
            }
        )
    if result.tost is not None:
        rows.append(
            {
                cols.procedure: "TOST",
                cols.lower: result.tost.lower,
                cols.upper: result.tost.upper,
                cols.mean: result.tost.mean,
                cols.equivalent: result.tost.equivalent,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[cols.procedure, cols.lower, cols.upper, cols.mean, cols.equivalent],
    )
