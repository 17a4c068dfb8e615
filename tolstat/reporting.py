"""Format interval results as human-readable report lines.

This module is used after the numerical analysis; nothing here feeds back
into a computation, and raw bounds stay unrounded on the result records.
"""

from __future__ import annotations

from typing import List

from .schema import AnalysisResult

DEFAULT_DECIMALS = 3


def format_interval(lower: float, upper: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format an interval as ``"[lower, upper]"`` with fixed decimal places.

    Args:
        lower (float): Lower bound.
        upper (float): Upper bound.
        decimals (int, optional): Digits after the decimal point. Defaults to
            ``3``.

    Returns:
        str: For example ``"[12.251, 12.749]"``.
    """
    return f"[{float(lower):.{decimals}f}, {float(upper):.{decimals}f}]"


def percent_label(fraction: float) -> str:
    """Return ``fraction`` as a percentage string without trailing zeros.

    ``0.95 -> "95"``, ``0.975 -> "97.5"``. The value is rounded to ten decimal
    places first so binary artifacts such as ``94.99999999999999`` do not leak
    into labels.
    """
    pct = round(100.0 * float(fraction), 10)
    return f"{pct:g}"


def confidence_percent(alpha: float) -> str:
    """Return the confidence level ``1 - alpha`` as a percentage label."""
    return percent_label(1.0 - float(alpha))


def tost_verdict(equivalent: bool) -> str:
    return "Equivalent (Accepted)" if equivalent else "Not Equivalent (Rejected)"


def summary_lines(result: AnalysisResult, decimals: int = DEFAULT_DECIMALS) -> List[str]:
    """Build one report line per procedure that was run.

    Args:
        result (AnalysisResult): Output of ``analyze_sample``.
        decimals (int, optional): Decimal places for interval bounds.

    Returns:
        list[str]: Lines such as ``"95% CI: [12.251, 12.749]"``,
        ``"95% TI (99% coverage): [11.2, 13.8]"`` and
        ``"TOST Result: Equivalent (Accepted)"``, in CI/TI/TOST order.
    """
    conf = confidence_percent(result.config.alpha)
    lines = []
    ci = result.confidence_interval
    if ci is not None:
        lines.append(f"{conf}% CI: {format_interval(ci.lower, ci.upper, decimals)}")
    ti = result.tolerance_interval
    if ti is not None:
        cov = percent_label(result.config.coverage)
        lines.append(
            f"{conf}% TI ({cov}% coverage): "
            f"{format_interval(ti.lower, ti.upper, decimals)}"
        )
    if result.tost is not None:
        lines.append(f"TOST Result: {tost_verdict(result.tost.equivalent)}")
    return lines


def print_summary(result: AnalysisResult, decimals: int = DEFAULT_DECIMALS) -> None:
    print(f"\nInterval summary (n={result.n}):")
    lines = summary_lines(result, decimals=decimals)
    if not lines:
        print("  (no procedures selected)")
        return
    for line in lines:
        print(f" - {line}")
