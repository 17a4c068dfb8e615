"""Two-sided critical values used to scale standard errors into half-widths.

Values come from a small table of Student-t quantiles at alpha = 0.05 keyed by
sample size. Sizes not in the table fall back to the normal value 1.96. The
requested alpha is accepted for interface symmetry and does not change the
result.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Protocol

NORMAL_APPROX_CRITICAL = 1.96

_T_TABLE_ALPHA_05: Mapping[int, float] = MappingProxyType(
    {
        5: 2.776,
        10: 2.262,
        20: 2.093,
        30: 2.045,
        50: 2.009,
        100: 1.984,
    }
)


class CriticalValueProvider(Protocol):
    def critical_value(self, n: int, alpha: float) -> float:
        ...


class TabulatedCriticalValues:
    """Exact-key table lookup with a constant fallback.

    Args:
        table: Mapping of sample size to two-sided critical value. Keys are
            matched exactly; there is no interpolation between them.
        fallback: Value returned for sample sizes absent from ``table``.
    """

    def __init__(
        self,
        table: Optional[Mapping[int, float]] = None,
        fallback: float = NORMAL_APPROX_CRITICAL,
    ) -> None:
        source = _T_TABLE_ALPHA_05 if table is None else table
        self.table: Mapping[int, float] = MappingProxyType(
            {int(k): float(source[k]) for k in sorted(source)}
        )
        self.fallback = float(fallback)

    def critical_value(self, n: int, alpha: float) -> float:
        return self.table.get(int(n), self.fallback)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(keys={list(self.table)}, "
            f"fallback={self.fallback})"
        )


DEFAULT_PROVIDER = TabulatedCriticalValues()


def critical_value(
    n: int, alpha: float, provider: Optional[CriticalValueProvider] = None
) -> float:
    """Return the two-sided critical value for a sample of size ``n``.

    Examples: ``critical_value(10, 0.05) == 2.262``;
    ``critical_value(7, 0.01) == 1.96``.
    """
    return (provider or DEFAULT_PROVIDER).critical_value(n, alpha)
