"""
shunt-calc - Interactive Arithmetic Expression Evaluator

Reads a line containing numbers, the four basic binary operators and
parentheses, and reduces it to a single floating-point result through a
three-stage pipeline: tokenize -> shunting-yard -> postfix evaluation.
"""

__version__ = "1.0.0"
__author__ = "shunt-calc Team"

from shunt_calc.errors import (
    CalculatorError,
    ConversionError,
    EvalError,
    InvalidNumberLiteral,
    LexError,
    MalformedExpression,
    StackUnderflow,
    UnbalancedParentheses,
    UnsupportedCharacter,
)
from shunt_calc.evaluator import evaluate
from shunt_calc.lexer import tokenize
from shunt_calc.models import NumberToken, Operator, OperatorToken, Token, TokenSequence
from shunt_calc.pipeline import ExpressionPipeline, calculate, format_result
from shunt_calc.shunting import to_postfix

__all__ = [
    "CalculatorError",
    "ConversionError",
    "EvalError",
    "ExpressionPipeline",
    "InvalidNumberLiteral",
    "LexError",
    "MalformedExpression",
    "NumberToken",
    "Operator",
    "OperatorToken",
    "StackUnderflow",
    "Token",
    "TokenSequence",
    "UnbalancedParentheses",
    "UnsupportedCharacter",
    "calculate",
    "evaluate",
    "format_result",
    "to_postfix",
    "tokenize",
]
