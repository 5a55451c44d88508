"""Public API - returns structured objects without side effects."""

from __future__ import annotations

import sympy as sp

from .calculator import FAILURE_RESULT, calc
from .evaluator import evaluate_postfix
from .parser import infix_to_postfix, strip_whitespace
from .types import CalculationError, EvalResult


def to_postfix(expression: str) -> list[str]:
    """Convert an expression to postfix tokens.

    Args:
        expression: Infix expression string (e.g., "2+2*(4-2)")

    Returns:
        Postfix tokens

    Raises:
        CalculationError: If the expression cannot be converted

    Example:
        >>> from calculation_pkg.api import to_postfix
        >>> to_postfix("2 + 2 * (4 - 2)")
        ['2', '2', '4', '2', '-', '*', '+']
    """
    return infix_to_postfix(strip_whitespace(expression))


def _exact_value(expression: str) -> str:
    """Evaluate the same postfix stream over rationals."""
    return str(evaluate_postfix(to_postfix(expression), number=sp.Rational))


def evaluate(expression: str) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "9/2", "2+2*(4-2)")

    Returns:
        EvalResult with the formatted result and its exact rational form

    Example:
        >>> from calculation_pkg.api import evaluate
        >>> result = evaluate("9/2")
        >>> print(result.result, result.exact)
        4.5 9/2
        >>> evaluate("2&3").error_code
        'UNKNOWN_SYMBOL'
    """
    result, error = calc(expression)
    if error is not None:
        return EvalResult(
            ok=False, result=FAILURE_RESULT, error=str(error), error_code=error.code
        )
    try:
        exact = _exact_value(expression)
    except CalculationError:
        # Float cancellation can leave a divisor that is exactly zero over rationals
        exact = None
    return EvalResult(ok=True, result=result, exact=exact)


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression by converting and evaluating it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from calculation_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("(1+2")
        (False, 'parenthesis count mismatch: 1 opening and 0 closing parentheses')
    """
    try:
        evaluate_postfix(to_postfix(expression))
    except CalculationError as e:
        return False, str(e)
    return True, None
