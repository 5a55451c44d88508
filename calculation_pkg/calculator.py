"""Orchestration: clean the input, convert, evaluate, round and format.

``calc`` never raises for a bad expression. Failures come back as the second
element of the returned pair, with "0" in the result slot.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .config import OUTPUT_PRECISION, ROUNDING_SCALE
from .evaluator import evaluate_postfix
from .logging_config import get_logger
from .parser import infix_to_postfix, strip_whitespace
from .types import CalculationError

logger = get_logger("calculator")

FAILURE_RESULT = "0"


def round_result(value: float, scale: float = ROUNDING_SCALE) -> float:
    """Round to the nearest 1/scale, halves away from zero.

    Args:
        value: Raw evaluation result
        scale: Rounding scale (1e6 keeps six decimal places)

    Returns:
        Rounded value
    """
    # Decimal(float) is exact, so ROUND_HALF_UP rounds the true product
    scaled = Decimal(value * scale).to_integral_value(rounding=ROUND_HALF_UP)
    return float(scaled) / scale


def format_result(value: float, precision: int = OUTPUT_PRECISION) -> str:
    """Format a rounded value in general (%g) notation.

    Args:
        value: Numeric value to format
        precision: Maximum number of significant digits

    Returns:
        Shortest general representation, e.g. "6", "4.5", "1e+07"
    """
    return f"{value:.{int(precision)}g}"


def calc(expression: str) -> tuple[str, CalculationError | None]:
    """Evaluate an arithmetic expression of single-digit operands.

    Args:
        expression: Raw input; whitespace anywhere is ignored

    Returns:
        (formatted result, None) on success, ("0", error) on failure

    Example:
        >>> calc("2+2* ( 4 - 2 )")
        ('6', None)
        >>> calc("1/0")[1].code
        'DIVISION_BY_ZERO'
    """
    cleaned = strip_whitespace(expression)
    logger.debug("Evaluating %r", cleaned)
    try:
        postfix = infix_to_postfix(cleaned)
        value = evaluate_postfix(postfix)
    except CalculationError as e:
        logger.debug("Calculation of %r failed: %s [%s]", cleaned, e, e.code)
        return FAILURE_RESULT, e
    return format_result(round_result(value)), None
