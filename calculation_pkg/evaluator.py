"""Postfix (reverse Polish) evaluation on a value stack."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

from .logging_config import get_logger
from .parser import is_digit
from .types import (
    DivisionByZeroError,
    InvalidExpressionError,
    NumericParseError,
    UnknownOperatorError,
)

logger = get_logger("evaluator")

# Division is handled separately so the zero check sees the divisor first
_BINARY_OPS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def _apply(token: str, a: Any, b: Any) -> Any:
    if token == "/":
        if b == 0:
            raise DivisionByZeroError()
        return a / b
    op = _BINARY_OPS.get(token)
    if op is None:
        raise UnknownOperatorError(token)
    return op(a, b)


def evaluate_postfix(
    postfix: Iterable[str], number: Callable[[str], Any] = float
) -> Any:
    """Evaluate postfix tokens and return the single remaining value.

    Args:
        postfix: Tokens produced by parser.infix_to_postfix
        number: Constructor for operand tokens (float, or e.g. sympy.Rational
            for exact arithmetic)

    Returns:
        The value of the expression, of the type produced by ``number``

    Raises:
        NumericParseError: A digit token could not be converted
        InvalidExpressionError: Too few operands, or not exactly one result
        DivisionByZeroError: The divisor is exactly zero
        UnknownOperatorError: A non-digit token that is not + - * /
    """
    stack: list[Any] = []

    for token in postfix:
        if is_digit(token[:1]):
            try:
                stack.append(number(token))
            except (ValueError, TypeError) as e:
                raise NumericParseError(token, str(e)) from e
            continue

        if len(stack) < 2:
            raise InvalidExpressionError()
        b = stack.pop()
        a = stack.pop()
        stack.append(_apply(token, a, b))

    if len(stack) != 1:
        raise InvalidExpressionError()

    logger.debug("Postfix evaluated to %r", stack[0])
    return stack[0]
