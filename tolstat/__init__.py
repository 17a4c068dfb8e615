"""
A Python package for single-sample interval estimation.

Computes a confidence interval for the mean, an approximate normal tolerance
interval and a Two-One-Sided-Tests (TOST) equivalence verdict.

Modules:
    - data_processing: Parses pasted text or CSV columns into a clean sample.
    - stats: Descriptive statistics, critical values and the tolerance factor.
    - analysis: The three interval/test procedures and their orchestration.
    - reporting: Human-readable interval and verdict lines.
    - plotting: Figures of the sample and the computed intervals.
"""

__version__ = "1.0.0"

from .analysis import (
    analyze_sample,
    compute_confidence_interval,
    compute_tolerance_interval,
    compute_tost_equivalence,
    create_results_dataframe,
)
from .config import AnalysisConfig
from .data_processing import load_sample_csv, parse_sample
from .errors import (
    InsufficientDataError,
    InvalidConfigError,
    NonFiniteDataError,
    TolstatError,
)
from .reporting import print_summary, summary_lines
from .schema import (
    AnalysisResult,
    ConfidenceIntervalResult,
    TOSTResult,
    ToleranceIntervalResult,
)

__all__ = [
    # Data processing
    "parse_sample",
    "load_sample_csv",
    # Analysis
    "analyze_sample",
    "compute_confidence_interval",
    "compute_tolerance_interval",
    "compute_tost_equivalence",
    "create_results_dataframe",
    # Records and configuration
    "AnalysisConfig",
    "AnalysisResult",
    "ConfidenceIntervalResult",
    "ToleranceIntervalResult",
    "TOSTResult",
    # Errors
    "TolstatError",
    "InvalidConfigError",
    "InsufficientDataError",
    "NonFiniteDataError",
    # Reporting
    "summary_lines",
    "print_summary",
]
