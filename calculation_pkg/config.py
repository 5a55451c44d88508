"""Centralized configuration for the calculation package.

This module defines:
- Output precision and rounding scale for formatted results
- The operator precedence table used by the shunting-yard converter
- Accepted character sets and the whitespace regex
- Logging defaults

Configuration can be overridden via environment variables (prefixed with CALCULATION_).
"""

import os
import re
from types import MappingProxyType

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("calculation")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Result formatting
OUTPUT_PRECISION = int(
    os.getenv("CALCULATION_OUTPUT_PRECISION", "6")
)  # significant digits for %g formatting
ROUNDING_SCALE = float(
    os.getenv("CALCULATION_ROUNDING_SCALE", "1e6")
)  # results are rounded to 1/ROUNDING_SCALE before formatting

# Logging
LOG_LEVEL = os.getenv("CALCULATION_LOG_LEVEL", "WARNING")

# Sample evaluated by `python -m calculation_pkg`
DEMO_EXPRESSION = "2+2*(4- 2)"

# Grammar
OPERATORS = frozenset("+-*/")
LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"

# Read-only after import; parentheses are never compared but keep a rank of 0
PRECEDENCE = MappingProxyType(
    {
        "(": 0,
        ")": 0,
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
    }
)

WHITESPACE_RE = re.compile(r"\s+")
