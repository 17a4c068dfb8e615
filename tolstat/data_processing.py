"""
Turns pasted text or CSV columns into a clean numeric sample.
"""

# Tokens are read leniently: the leading decimal literal of each token is
# kept ("12.5kg" -> 12.5) and anything without one is dropped. Noisy pasted
# data is expected, so dropped tokens are logged rather than raised.

import logging
import math
import re

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r",|\s+")
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)


def _leading_float(token):
    """Return the float value of the leading decimal literal in ``token``.

    Returns ``None`` when the token does not start with a number.
    """
    match = _LEADING_NUMBER.match(token.strip())
    if match is None:
        return None
    return float(match.group(0))


def parse_sample(text):
    """Parse free-form text into an ordered sample of finite numbers.

    Args:
        text (str): Values separated by commas and/or whitespace, for example
            ``"12.3, 12.5, 12.7"``.

    Returns:
        numpy.ndarray: 1-D ``float64`` array in input order. Empty when no
        token parses.

    Note:
        Tokens that do not start with a number, or whose value is not finite
        (overflowing exponents), are skipped and counted in an INFO log
        record. This is a tolerance policy, not an error.
    """
    values = []
    skipped = 0
    for token in _SEPARATORS.split(text or ""):
        if not token:
            continue
        value = _leading_float(token)
        if value is None or not math.isfinite(value):
            skipped += 1
            continue
        values.append(value)

    if skipped:
        logger.info("Skipped %d unparseable token(s) in sample input", skipped)
    return np.asarray(values, dtype=float)


def load_sample_csv(filepath, column=None):
    """
    Load a sample from one column of a CSV file.

    Args:
        filepath (str): Path to the CSV file.
        column (str, optional): Column to read. Defaults to the first column
            holding at least one numeric value.

    Returns:
        numpy.ndarray: Finite values of the column in row order.

    Raises:
        KeyError: If ``column`` is not present in the file.
        ValueError: If no column holds numeric data.
    """
    df = pd.read_csv(filepath)

    if column is not None:
        if column not in df.columns:
            raise KeyError(f"Column '{column}' not found in {filepath}.")
        series = pd.to_numeric(df[column], errors="coerce")
    else:
        series = None
        for name in df.columns:
            candidate = pd.to_numeric(df[name], errors="coerce")
            if candidate.notna().any():
                series = candidate
                column = name
                break
        if series is None:
            raise ValueError(f"No numeric column found in {filepath}.")

    values = series.to_numpy(dtype=float)
    finite = np.isfinite(values)
    dropped = int(np.sum(~finite))
    if dropped:
        logger.info(
            "Dropped %d non-numeric cell(s) from column '%s'", dropped, column
        )
    return values[finite]
