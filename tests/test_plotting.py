"""Verify interval figures are written and do not mutate results."""

import copy
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from tolstat.analysis import analyze_sample
from tolstat.config import AnalysisConfig
from tolstat.plotting import plot_intervals
from tolstat.plotting.style import sanitize_filename, save_figure


def _make_result(**flags):
    config = AnalysisConfig(alpha=0.05, coverage=0.99, margin=0.5)
    return analyze_sample([0.1, -0.2, 0.05, 0.3, -0.1], config, **flags)


def test_plot_intervals_writes_png(tmp_path):
    result = _make_result()
    out = plot_intervals(result, output_dir=str(tmp_path), formats=("png",))
    assert out.endswith("intervals.png")
    assert Path(out).exists()


def test_plot_intervals_with_subset_of_procedures(tmp_path):
    result = _make_result(run_ci=False, run_tost=False)
    out = plot_intervals(
        result, output_dir=str(tmp_path), filename="ti only", formats=("png",)
    )
    assert Path(out).name == "ti_only.png"


def test_plot_does_not_mutate_result(tmp_path):
    result = _make_result()
    snapshot = copy.deepcopy(result)
    plot_intervals(result, output_dir=str(tmp_path), formats=("png",))
    assert np.array_equal(result.sample, snapshot.sample)
    assert result.confidence_interval == snapshot.confidence_interval
    assert result.tost == snapshot.tost


def test_save_figure_uses_tight_bounding(monkeypatch, tmp_path):
    fig, _ = plt.subplots()
    calls = []

    def _fake_savefig(path, **kwargs):
        calls.append((Path(path).suffix, kwargs))

    monkeypatch.setattr(fig, "savefig", _fake_savefig)

    saved = save_figure(fig, tmp_path / "bundle.png")

    assert saved.name == "bundle.png"
    assert [ext for ext, _ in calls] == [".png", ".pdf", ".svg"]
    for ext, kwargs in calls:
        assert kwargs.get("bbox_inches") == "tight"
        assert kwargs.get("pad_inches") == 0.12
        if ext == ".png":
            assert kwargs.get("dpi") == 300
        else:
            assert kwargs.get("dpi") is None

    plt.close(fig)


def test_sanitize_filename():
    assert sanitize_filename("  my figure (v2) ") == "my_figure_v2"
    assert sanitize_filename("???") == "figure"
