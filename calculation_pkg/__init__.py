"""Calculation package: shunting-yard conversion and postfix evaluation of arithmetic."""

__all__ = [
    "config",
    "parser",
    "evaluator",
    "calculator",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "calc",
    "evaluate",
    "to_postfix",
    "validate_expression",
]
