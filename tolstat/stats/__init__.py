"""
Statistical utilities for interval estimation.

This subpackage provides the numerical building blocks used by the interval
procedures. All functions operate on arrays and primitive types.

Modules:
    descriptive:
        Sample mean and Bessel-corrected standard deviation.

    critical_values:
        Tabulated two-sided critical values with a normal fallback, behind a
        provider interface.

    tolerance:
        Approximate normal tolerance factor (k-factor).

Design Principle:
    This subpackage has no dependencies on plotting/ or reporting modules.
    It provides pure numerical utilities that can be independently tested.
"""

from .critical_values import (
    DEFAULT_PROVIDER,
    NORMAL_APPROX_CRITICAL,
    CriticalValueProvider,
    TabulatedCriticalValues,
    critical_value,
)
from .descriptive import sample_mean, sample_std
from .tolerance import k_factor

__all__ = [
    "DEFAULT_PROVIDER",
    "NORMAL_APPROX_CRITICAL",
    "CriticalValueProvider",
    "TabulatedCriticalValues",
    "critical_value",
    "sample_mean",
    "sample_std",
    "k_factor",
]
