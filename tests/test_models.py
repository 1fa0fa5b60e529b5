"""
Tests for operators, tokens and token sequences.
"""

import math

import pytest

from shunt_calc.models import NumberToken, Operator, OperatorToken, TokenSequence


class TestOperator:
    """Test operator lookup, precedence and application."""

    def test_from_char(self):
        assert Operator.from_char("+") is Operator.ADD
        assert Operator.from_char("(") is Operator.PAREN_OPEN
        assert Operator.from_char(")") is Operator.PAREN_CLOSE

    def test_from_char_unknown_raises_error(self):
        with pytest.raises(ValueError):
            Operator.from_char("^")

    def test_precedence(self):
        assert Operator.PAREN_OPEN.precedence == 0
        assert Operator.PAREN_CLOSE.precedence == 0
        assert Operator.ADD.precedence == Operator.SUB.precedence == 1
        assert Operator.MUL.precedence == Operator.DIV.precedence == 2

    def test_is_arithmetic(self):
        assert Operator.DIV.is_arithmetic
        assert not Operator.PAREN_OPEN.is_arithmetic

    def test_apply(self):
        assert Operator.ADD.apply(2, 3) == 5
        assert Operator.SUB.apply(2, 3) == -1
        assert Operator.MUL.apply(4, 2.5) == 10
        assert Operator.DIV.apply(7, 2) == 3.5

    def test_apply_on_parenthesis_raises_error(self):
        with pytest.raises(ValueError):
            Operator.PAREN_CLOSE.apply(1, 2)

    def test_str_is_symbol(self):
        assert str(Operator.MUL) == "*"


class TestDivisionByZero:
    """Division by zero follows IEEE float semantics instead of raising."""

    def test_positive_over_zero(self):
        assert Operator.DIV.apply(7, 0) == math.inf

    def test_negative_over_zero(self):
        assert Operator.DIV.apply(-7, 0) == -math.inf

    def test_positive_over_negative_zero(self):
        assert Operator.DIV.apply(7, -0.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(Operator.DIV.apply(0, 0))


class TestTokenSequence:
    """Test sequence behaviour and diagnostic rendering."""

    def test_render_mixed(self):
        tokens = TokenSequence([
            NumberToken(1.0),
            NumberToken(2.5),
            OperatorToken(Operator.ADD),
        ])
        assert str(tokens) == "{1.000, 2.500, +}"

    def test_render_leading_operator(self):
        tokens = TokenSequence([OperatorToken(Operator.PAREN_OPEN), NumberToken(1.0)])
        assert str(tokens) == "{(, 1.000}"

    def test_render_empty(self):
        assert str(TokenSequence()) == "{}"

    def test_token_str(self):
        assert str(NumberToken(3.0)) == "Num(3.000)"
        assert str(OperatorToken(Operator.SUB)) == "Op(-)"

    def test_equality_by_value(self):
        a = TokenSequence([NumberToken(1.0)])
        b = TokenSequence([NumberToken(1.0)])
        assert a == b
        assert a == [NumberToken(1.0)]

    def test_append_and_index(self):
        tokens = TokenSequence()
        tokens.append(NumberToken(4.0))
        assert len(tokens) == 1
        assert tokens[0] == NumberToken(4.0)
