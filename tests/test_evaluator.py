"""
Tests for the postfix evaluator.
"""

import math

import pytest

from shunt_calc.errors import EvalError, MalformedExpression, StackUnderflow
from shunt_calc.evaluator import evaluate
from shunt_calc.models import NumberToken, Operator, OperatorToken, TokenSequence


def seq(*items) -> TokenSequence:
    """Build a sequence from floats and operator symbols."""
    return TokenSequence(
        OperatorToken(Operator.from_char(item)) if isinstance(item, str) else NumberToken(float(item))
        for item in items
    )


class TestEvaluate:
    """Test evaluation of well-formed postfix sequences."""

    def test_single_number(self):
        assert evaluate(seq(7)) == 7

    def test_addition(self):
        assert evaluate(seq(1, 2, "+")) == 3

    def test_operand_order(self):
        assert evaluate(seq(10, 4, "-")) == 6
        assert evaluate(seq(10, 4, "/")) == 2.5

    def test_chained(self):
        assert evaluate(seq(2, 3, 4, "+", "*")) == 14

    def test_division_by_zero_is_infinity(self):
        assert evaluate(seq(7, 0, "/")) == math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(evaluate(seq(0, 0, "/")))


class TestEvaluateErrors:
    """Test malformed postfix sequences."""

    def test_operator_without_operands(self):
        with pytest.raises(StackUnderflow) as exc_info:
            evaluate(seq("+"))
        assert str(exc_info.value) == "StackUnderflow: {+} (not enough operands for an operator)"

    def test_operator_with_one_operand(self):
        with pytest.raises(StackUnderflow):
            evaluate(seq(1, "+", 2))

    def test_two_values_left(self):
        with pytest.raises(MalformedExpression) as exc_info:
            evaluate(seq(1, 2))
        assert str(exc_info.value) == "MalformedExpression: {1.000, 2.000} (2 values left on the stack)"

    def test_empty_sequence(self):
        with pytest.raises(MalformedExpression):
            evaluate(TokenSequence())

    def test_parenthesis_in_postfix(self):
        with pytest.raises(MalformedExpression):
            evaluate(seq(1, 2, "("))

    def test_errors_share_base(self):
        with pytest.raises(EvalError):
            evaluate(seq(1, 2, 3, "+"))
