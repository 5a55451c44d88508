"""Type definitions: result dataclass and the calculation error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: str = "0"
    exact: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "result": self.result}
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"EvalResult(ok=False, error={self.error!r}, "
                f"error_code={self.error_code!r})"
            )
        parts = [f"ok={self.ok}", f"result={self.result!r}"]
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        return f"EvalResult({', '.join(parts)})"


class CalculationError(Exception):
    """Base class for every failure of a single calculation."""

    default_code = "CALCULATION_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnknownSymbolError(CalculationError):
    """Raised when the input holds a character outside the grammar."""

    default_code = "UNKNOWN_SYMBOL"

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"unknown symbol {symbol}")


class UnbalancedParenthesesError(CalculationError):
    """Raised when a closing parenthesis has no matching opening one."""

    default_code = "UNBALANCED_PARENTHESES"

    def __init__(self, message: str = "unbalanced parentheses"):
        super().__init__(message)


class ParenthesisCountMismatchError(CalculationError):
    """Raised when open and close parenthesis counts differ after the scan."""

    default_code = "PARENTHESIS_COUNT_MISMATCH"

    def __init__(self, opened: int, closed: int):
        self.opened = opened
        self.closed = closed
        super().__init__(
            "parenthesis count mismatch: "
            f"{opened} opening and {closed} closing parentheses"
        )


class InvalidExpressionError(CalculationError):
    """Raised when the postfix stream is malformed."""

    default_code = "INVALID_EXPRESSION"

    def __init__(self, message: str = "invalid expression"):
        super().__init__(message)


class DivisionByZeroError(CalculationError):
    default_code = "DIVISION_BY_ZERO"

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class UnknownOperatorError(CalculationError):
    default_code = "UNKNOWN_OPERATOR"

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"unknown operator {operator}")


class NumericParseError(CalculationError):
    """Raised when a digit token cannot be converted to a number."""

    default_code = "NUMERIC_PARSE_FAILURE"

    def __init__(self, token: str, reason: str | None = None):
        self.token = token
        message = f"cannot parse number {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
