"""Tests for report-line formatting."""

from tolstat.analysis import analyze_sample
from tolstat.config import AnalysisConfig
from tolstat.reporting import (
    confidence_percent,
    format_interval,
    percent_label,
    print_summary,
    summary_lines,
)


def test_format_interval_fixed_decimals():
    assert format_interval(12.25049, 12.7) == "[12.250, 12.700]"
    assert format_interval(-1.0, 1.0, decimals=1) == "[-1.0, 1.0]"


def test_percent_labels_drop_trailing_zeros():
    assert confidence_percent(0.05) == "95"
    assert percent_label(0.99) == "99"
    assert percent_label(0.975) == "97.5"
    assert confidence_percent(0.1) == "90"


def test_summary_lines_for_constant_sample():
    config = AnalysisConfig(alpha=0.05, coverage=0.99, margin=0.5)
    result = analyze_sample([10, 10, 10, 10, 10], config)
    assert summary_lines(result) == [
        "95% CI: [10.000, 10.000]",
        "95% TI (99% coverage): [10.000, 10.000]",
        "TOST Result: Not Equivalent (Rejected)",
    ]


def test_summary_lines_skip_unselected_procedures():
    config = AnalysisConfig(alpha=0.1, coverage=0.9, margin=1.0)
    result = analyze_sample([0.1, -0.1, 0.05], config, run_ci=False, run_ti=False)
    assert summary_lines(result) == ["TOST Result: Equivalent (Accepted)"]


def test_print_summary(capsys):
    config = AnalysisConfig(alpha=0.05, coverage=0.99, margin=0.5)
    result = analyze_sample([1.0, 2.0], config, run_ti=False, run_tost=False)
    print_summary(result)
    out = capsys.readouterr().out
    assert "Interval summary (n=2)" in out
    assert "95% CI:" in out
