"""Normal tolerance-interval multiplier."""

from __future__ import annotations

import math
from typing import Optional

from ..errors import InsufficientDataError
from .critical_values import CriticalValueProvider, critical_value


def k_factor(
    n: int,
    alpha: float,
    coverage: float,
    provider: Optional[CriticalValueProvider] = None,
) -> float:
    """Return the tolerance factor k applied to the sample standard deviation.

    Args:
        n (int): Sample size.
        alpha (float): Significance level, forwarded to the critical-value
            lookup.
        coverage (float): Target population proportion. Accepted for API
            symmetry; the approximation below does not depend on it.
        provider (CriticalValueProvider, optional): Source of the critical
            value. Defaults to the tabulated provider.

    Returns:
        float: ``t * sqrt((n + 1) / n * (1 + 1 / (n - 1)))``. Non-negative
        whenever ``t`` is.

    Raises:
        InsufficientDataError: If ``n < 2``.

    Note:
        Large-sample approximation, not the noncentral chi-square solution.
    """
    n = int(n)
    if n < 2:
        raise InsufficientDataError(n, required=2)
    t = critical_value(n, alpha, provider=provider)
    return float(t * math.sqrt((n + 1) / n * (1.0 + 1.0 / (n - 1))))
