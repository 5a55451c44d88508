"""Test that API functions return typed results."""

import pytest

from calculation_pkg.api import evaluate, to_postfix, validate_expression
from calculation_pkg.types import EvalResult, UnknownSymbolError


class TestAPITypedReturns:
    """Test that all API functions return typed dataclasses."""

    def test_evaluate_returns_eval_result(self):
        result = evaluate("2+2*(4-2)")
        assert isinstance(result, EvalResult)
        assert result.ok is True
        assert result.result == "6"
        assert result.exact == "6"
        assert result.error is None

    def test_evaluate_exact_rational(self):
        result = evaluate("9/2")
        assert result.result == "4.5"
        assert result.exact == "9/2"

    def test_evaluate_exact_keeps_full_precision(self):
        result = evaluate("2/3")
        assert result.result == "0.666667"
        assert result.exact == "2/3"

    def test_evaluate_error_returns_eval_result(self):
        result = evaluate("1/0")
        assert isinstance(result, EvalResult)
        assert result.ok is False
        assert result.result == "0"
        assert result.exact is None
        assert result.error == "division by zero"
        assert result.error_code == "DIVISION_BY_ZERO"

    def test_to_postfix(self):
        assert to_postfix("2 + 2 * (4 - 2)") == ["2", "2", "4", "2", "-", "*", "+"]

    def test_to_postfix_raises(self):
        with pytest.raises(UnknownSymbolError):
            to_postfix("2&3")

    def test_validate_expression_valid(self):
        assert validate_expression("2 + 2") == (True, None)

    def test_validate_expression_invalid(self):
        is_valid, error = validate_expression("(1+2")
        assert is_valid is False
        assert "mismatch" in error

    def test_validate_expression_catches_evaluation_errors(self):
        is_valid, error = validate_expression("5/(2-2)")
        assert is_valid is False
        assert error == "division by zero"

    def test_result_has_repr(self):
        assert repr(evaluate("9/2")) == "EvalResult(ok=True, result='4.5', exact='9/2')"
        assert repr(evaluate("2&3")) == (
            "EvalResult(ok=False, error='unknown symbol &', error_code='UNKNOWN_SYMBOL')"
        )

    def test_result_to_dict(self):
        assert evaluate("9/2").to_dict() == {"ok": True, "result": "4.5", "exact": "9/2"}
        assert evaluate("2+").to_dict() == {
            "ok": False,
            "result": "0",
            "error": "invalid expression",
            "error_code": "INVALID_EXPRESSION",
        }
