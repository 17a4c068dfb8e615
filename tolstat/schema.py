"""Result records and standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import AnalysisConfig


@dataclass(frozen=True)
class ConfidenceIntervalResult:
    lower: float
    upper: float


@dataclass(frozen=True)
class ToleranceIntervalResult:
    lower: float
    upper: float


@dataclass(frozen=True)
class TOSTResult:
    """Outcome of the two one-sided tests against ``[-margin, +margin]``.

    ``lower`` and ``upper`` bound the mean at the fixed 1.96 multiplier and are
    reported for display; ``equivalent`` is the test verdict.
    """

    equivalent: bool
    lower: float
    upper: float
    mean: float


@dataclass(frozen=True)
class AnalysisResult:
    """Everything produced by one call to ``analyze_sample``.

    Procedures that were not selected leave their field as ``None``.
    """

    sample: np.ndarray
    config: AnalysisConfig
    confidence_interval: Optional[ConfidenceIntervalResult] = None
    tolerance_interval: Optional[ToleranceIntervalResult] = None
    tost: Optional[TOSTResult] = None

    @property
    def n(self) -> int:
        return int(len(self.sample))


@dataclass(frozen=True)
class ResultColumns:
    """Container for standardized column labels.

    Attributes:
        procedure: Name of the procedure that produced the row
            (``"CI"``, ``"TI"`` or ``"TOST"``).
        lower: Lower interval bound, in the units of the sample.
        upper: Upper interval bound, in the units of the sample.
        mean: Sample mean; filled for every row so rows can be compared.
        equivalent: TOST verdict; missing for CI and TI rows.
    """

    procedure: str = "Procedure"
    lower: str = "Lower"
    upper: str = "Upper"
    mean: str = "Mean"
    equivalent: str = "Equivalent"
