"""Tests for the command-line entry point."""

import io
import logging

import pandas as pd

from tolstat import cli


def test_cli_prints_all_results(capsys):
    code = cli.main(["12.3,", "12.5,", "12.7"])
    out = capsys.readouterr().out
    assert code == 0
    assert "95% CI:" in out
    assert "95% TI (99% coverage):" in out
    assert "TOST Result: Not Equivalent (Rejected)" in out


def test_cli_respects_procedure_flags(capsys):
    code = cli.main(["--no-ci", "--no-ti", "--margin", "1", "0.1 -0.1 0.05"])
    out = capsys.readouterr().out
    assert code == 0
    assert "CI:" not in out
    assert "TOST Result: Equivalent (Accepted)" in out


def test_cli_reports_insufficient_data(capsys, caplog):
    caplog.set_level(logging.ERROR)
    assert cli.main(["1, x"]) == 1
    assert any("InsufficientDataError" in rec.message for rec in caplog.records)
    assert "Interval summary" not in capsys.readouterr().out


def test_cli_reports_invalid_config(caplog):
    caplog.set_level(logging.ERROR)
    assert cli.main(["--alpha", "1.5", "1 2 3"]) == 1
    assert any("InvalidConfigError" in rec.message for rec in caplog.records)


def test_cli_reads_csv_and_plots(tmp_path, capsys):
    csv_path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0, 5.0]}).to_csv(csv_path, index=False)
    plot_dir = tmp_path / "figs"

    code = cli.main(["--input", str(csv_path), "--plot-dir", str(plot_dir)])

    assert code == 0
    assert "95% CI: [1.037, 4.963]" in capsys.readouterr().out
    assert (plot_dir / "intervals.png").exists()


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4.9 5.0 5.1\n"))
    assert cli.main([]) == 0
    assert "95% CI:" in capsys.readouterr().out


def test_cli_reports_missing_input_file(tmp_path, caplog):
    caplog.set_level(logging.ERROR)
    assert cli.main(["--input", str(tmp_path / "absent.csv")]) == 1
    assert any("FileNotFoundError" in rec.message for rec in caplog.records)


def test_cli_reports_missing_column(tmp_path, caplog):
    caplog.set_level(logging.ERROR)
    csv_path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1.0, 2.0, 3.0]}).to_csv(csv_path, index=False)
    assert cli.main(["--input", str(csv_path), "--column", "y"]) == 1
    assert any("KeyError" in rec.message for rec in caplog.records)


def test_cli_reports_csv_without_numeric_column(tmp_path, caplog):
    caplog.set_level(logging.ERROR)
    csv_path = tmp_path / "data.csv"
    pd.DataFrame({"label": ["a", "b", "c"]}).to_csv(csv_path, index=False)
    assert cli.main(["--input", str(csv_path)]) == 1
    assert any("No numeric column" in rec.message for rec in caplog.records)


def test_cli_reports_overflowing_sample(caplog):
    caplog.set_level(logging.ERROR)
    assert cli.main(["1e308 1.5e308 1.7e308"]) == 1
    assert any("NonFiniteDataError" in rec.message for rec in caplog.records)
