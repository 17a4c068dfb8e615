"""Command-line entry point for interval and equivalence analysis."""

from __future__ import annotations

import argparse
import logging
import sys

from .analysis import analyze_sample
from .config import AnalysisConfig
from .data_processing import load_sample_csv, parse_sample
from .errors import TolstatError
from .reporting import print_summary

DEFAULT_ALPHA = 0.05
DEFAULT_COVERAGE = 0.99
DEFAULT_MARGIN = 0.5
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging to stdout and, optionally, a log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description=(
            "Confidence interval, tolerance interval and TOST equivalence "
            "for a single sample."
        )
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Sample values separated by commas and/or spaces (e.g. '12.3, 12.5').",
    )
    parser.add_argument("--input", default=None, help="Path to input CSV file.")
    parser.add_argument(
        "--column",
        default=None,
        help="CSV column to read (default: first numeric column).",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=DEFAULT_ALPHA,
        help=f"Significance level (default: {DEFAULT_ALPHA}).",
    )
    parser.add_argument(
        "--coverage",
        type=float,
        default=DEFAULT_COVERAGE,
        help=f"Tolerance interval coverage (default: {DEFAULT_COVERAGE}).",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=DEFAULT_MARGIN,
        help=f"TOST equivalence margin (default: {DEFAULT_MARGIN}).",
    )
    parser.add_argument("--no-ci", action="store_true", help="Skip the CI.")
    parser.add_argument("--no-ti", action="store_true", help="Skip the TI.")
    parser.add_argument("--no-tost", action="store_true", help="Skip the TOST.")
    parser.add_argument(
        "--plot-dir",
        default=None,
        help="Write an interval figure bundle to this directory.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    parser.add_argument("--log-file", default=None, help="Optional log file path.")
    return parser


def _read_sample(args: argparse.Namespace):
    if args.input:
        return load_sample_csv(args.input, column=args.column)
    if args.values:
        return parse_sample(" ".join(args.values))
    return parse_sample(sys.stdin.read())


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns a process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        config = AnalysisConfig(
            alpha=args.alpha, coverage=args.coverage, margin=args.margin
        )
        sample = _read_sample(args)
        result = analyze_sample(
            sample,
            config,
            run_ci=not args.no_ci,
            run_ti=not args.no_ti,
            run_tost=not args.no_tost,
        )
    except (TolstatError, OSError, KeyError, ValueError) as exc:
        logging.error("%s: %s", type(exc).__name__, exc)
        return 1

    print_summary(result)

    if args.plot_dir:
        from .plotting import plot_intervals

        path = plot_intervals(result, output_dir=args.plot_dir)
        logging.info("Interval figure: %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
