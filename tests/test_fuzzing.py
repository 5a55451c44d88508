"""Randomized tests: sympy as an arithmetic oracle, and whitespace insertion."""

import random
import string
import unittest

import pytest
import sympy as sp
from sympy import parse_expr

from calculation_pkg.calculator import calc
from calculation_pkg.evaluator import evaluate_postfix
from calculation_pkg.parser import infix_to_postfix
from calculation_pkg.types import CalculationError, UnknownSymbolError

ACCEPTED = set("0123456789+-*/()")


def _random_expression(rng: random.Random, depth: int) -> str:
    """Build a valid expression; every divisor is a nonzero digit."""
    if depth == 0 or rng.random() < 0.25:
        return str(rng.randint(0, 9))
    left = _random_expression(rng, depth - 1)
    op = rng.choice("+-*/")
    if op == "/":
        right = str(rng.randint(1, 9))
    else:
        right = _random_expression(rng, depth - 1)
    text = f"{left}{op}{right}"
    if rng.random() < 0.4:
        text = f"({text})"
    return text


def _sprinkle_whitespace(rng: random.Random, expression: str) -> str:
    pieces = []
    for char in expression:
        pieces.append(rng.choice(["", " ", "  ", "\t", "\n"]))
        pieces.append(char)
    pieces.append(rng.choice(["", " ", "\r\n"]))
    return "".join(pieces)


class TestAgainstSympy:
    """Results must match standard precedence-respecting arithmetic."""

    @pytest.mark.parametrize("seed", range(200))
    def test_matches_sympy(self, seed):
        rng = random.Random(seed)
        expression = _random_expression(rng, depth=4)
        expected = parse_expr(expression)
        assert expected.is_finite
        value = evaluate_postfix(infix_to_postfix(expression))
        assert value == pytest.approx(float(expected), rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("seed", range(50))
    def test_exact_evaluation_matches_sympy(self, seed):
        rng = random.Random(seed)
        expression = _random_expression(rng, depth=4)
        exact = evaluate_postfix(infix_to_postfix(expression), number=sp.Rational)
        assert exact == parse_expr(expression)


class TestWhitespaceInsertion(unittest.TestCase):
    def test_whitespace_does_not_change_result(self):
        rng = random.Random(1234)
        for _ in range(200):
            expression = _random_expression(rng, depth=3)
            spaced = _sprinkle_whitespace(rng, expression)
            result, error = calc(spaced)
            self.assertIsNone(error, spaced)
            self.assertEqual(result, calc(expression)[0])


class TestUnknownSymbols(unittest.TestCase):
    def test_every_foreign_character_is_named(self):
        foreign = [c for c in string.printable if c not in ACCEPTED and not c.isspace()]
        for char in foreign:
            result, error = calc(f"1+{char}2")
            self.assertEqual(result, "0")
            self.assertIsInstance(error, UnknownSymbolError, char)
            self.assertEqual(error.symbol, char)


class TestRandomGarbage(unittest.TestCase):
    def test_random_strings_never_raise(self):
        rng = random.Random(99)
        alphabet = "0123456789+-*/()  x&."
        for _ in range(300):
            text = "".join(rng.choices(alphabet, k=rng.randint(0, 20)))
            result, error = calc(text)
            if error is not None:
                self.assertEqual(result, "0")
                self.assertIsInstance(error, CalculationError)
            else:
                self.assertIsInstance(result, str)


if __name__ == "__main__":
    unittest.main()
