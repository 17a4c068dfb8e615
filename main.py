#!/usr/bin/env python3
"""
Main script for running interval analysis.
"""

# Pipeline overview:
# 1) Read the sample from command-line text, a CSV column, or stdin; tokens
#    that are not numbers are dropped.
# 2) Validate alpha, coverage and margin.
# 3) Compute the selected CI, TI and TOST results.
# 4) Print the summary and optionally write the interval figure.

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tolstat.cli import main

if __name__ == "__main__":
    sys.exit(main())
