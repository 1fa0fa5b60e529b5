"""
Core data models for shunt-calc.

Defines the operator set, the token variant that flows between the
pipeline stages, and the token sequence used both as the carrier between
stages and as the diagnostic payload of errors.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Union


# =============================================================================
# Operators
# =============================================================================

class Operator(str, Enum):
    """The six lexical symbols understood by the calculator."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"

    @classmethod
    def from_char(cls, ch: str) -> "Operator":
        """Map a single symbol to its operator."""
        return cls(ch)

    @property
    def precedence(self) -> int:
        if self in (Operator.PAREN_OPEN, Operator.PAREN_CLOSE):
            return 0
        if self in (Operator.ADD, Operator.SUB):
            return 1
        return 2

    @property
    def is_arithmetic(self) -> bool:
        return self not in (Operator.PAREN_OPEN, Operator.PAREN_CLOSE)

    def apply(self, x: float, y: float) -> float:
        """
        Apply a binary arithmetic operator to ``x`` and ``y``.

        Parentheses have no evaluation function; asking for one is a
        programming error, not a user error.
        """
        if self is Operator.ADD:
            return x + y
        if self is Operator.SUB:
            return x - y
        if self is Operator.MUL:
            return x * y
        if self is Operator.DIV:
            return _ieee_divide(x, y)
        raise ValueError(f"Operator {self.value!r} cannot be applied")

    def __str__(self) -> str:
        return self.value


def _ieee_divide(x: float, y: float) -> float:
    """Float division with IEEE-754 results for a zero divisor."""
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    # Sign of the infinity follows the signs of both operands, including -0.0
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


# =============================================================================
# Tokens
# =============================================================================

@dataclass(frozen=True)
class NumberToken:
    """A numeric literal."""
    value: float

    def __str__(self) -> str:
        return f"Num({self.value:.3f})"


@dataclass(frozen=True)
class OperatorToken:
    """One of the six operator symbols."""
    op: Operator

    def __str__(self) -> str:
        return f"Op({self.op})"


Token = Union[NumberToken, OperatorToken]


class TokenSequence:
    """
    Ordered sequence of tokens passed between pipeline stages.

    Renders as ``{1.000, 2.000, +}`` for diagnostics.
    """

    def __init__(self, tokens: Iterable[Token] = ()):
        self._tokens: list[Token] = list(tokens)

    def append(self, token: Token) -> None:
        self._tokens.append(token)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenSequence):
            return self._tokens == other._tokens
        if isinstance(other, list):
            return self._tokens == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TokenSequence({self._tokens!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(_render(token) for token in self._tokens) + "}"


def _render(token: Token) -> str:
    if isinstance(token, NumberToken):
        return f"{token.value:.3f}"
    return str(token.op)
