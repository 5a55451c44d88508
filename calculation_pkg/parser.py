"""Input cleaning and infix-to-postfix conversion.

This module handles:
- Whitespace removal from raw input
- Character classification (digits, operators, parentheses)
- Shunting-yard conversion of an infix character stream to postfix tokens

Operands are single digits: "12" is read as the two operands 1 and 2.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import (
    LEFT_PARENTHESIS,
    OPERATORS,
    PRECEDENCE,
    RIGHT_PARENTHESIS,
    WHITESPACE_RE,
)
from .logging_config import get_logger
from .types import (
    ParenthesisCountMismatchError,
    UnbalancedParenthesesError,
    UnknownSymbolError,
)

logger = get_logger("parser")


def strip_whitespace(expression: str) -> str:
    """Remove every run of whitespace from the expression.

    Args:
        expression: Raw input (e.g., "2+2* ( 4 - 2 )")

    Returns:
        Cleaned string (e.g., "2+2*(4-2)")
    """
    return WHITESPACE_RE.sub("", expression)


def is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() would also accept superscripts and other scripts
    return "0" <= char <= "9"


def is_operator(char: str) -> bool:
    return char in OPERATORS


def is_left_parenthesis(char: str) -> bool:
    return char == LEFT_PARENTHESIS


def is_right_parenthesis(char: str) -> bool:
    return char == RIGHT_PARENTHESIS


def infix_to_postfix(infix: Iterable[str]) -> list[str]:
    """Convert an infix character stream to postfix tokens (shunting-yard).

    Operators of equal precedence pop each other, so every operator is
    left-associative: "8-4-2" becomes ["8", "4", "-", "2", "-"].

    Args:
        infix: Characters of an expression with whitespace already removed

    Returns:
        Postfix tokens, each a single digit or operator character

    Raises:
        UnknownSymbolError: A character outside 0-9, + - * / and parentheses
        UnbalancedParenthesesError: A ")" with no "(" left on the stack
        ParenthesisCountMismatchError: Opening and closing counts differ
    """
    output: list[str] = []
    stack: list[str] = []  # operators and "(" only
    open_count = 0
    close_count = 0

    for char in infix:
        if is_digit(char):
            output.append(char)
        elif is_operator(char):
            while stack and PRECEDENCE[stack[-1]] >= PRECEDENCE[char]:
                output.append(stack.pop())
            stack.append(char)
        elif is_left_parenthesis(char):
            stack.append(char)
            open_count += 1
        elif is_right_parenthesis(char):
            while True:
                if not stack:
                    raise UnbalancedParenthesesError()
                top = stack.pop()
                if is_left_parenthesis(top):
                    break
                output.append(top)
            close_count += 1
        else:
            raise UnknownSymbolError(char)

    while stack:
        output.append(stack.pop())

    # Catches trailing unmatched "(" that the inline check cannot see
    if open_count != close_count:
        raise ParenthesisCountMismatchError(open_count, close_count)

    logger.debug("Converted to postfix: %s", " ".join(output))
    return output
