"""
Lexer for shunt-calc.

Turns a raw input line into an ordered TokenSequence, scanning left to
right with one character of lookahead.
"""

import structlog

from shunt_calc.errors import InvalidNumberLiteral, UnsupportedCharacter
from shunt_calc.models import NumberToken, Operator, OperatorToken, TokenSequence

logger = structlog.get_logger()

NUMBER_CHARS = frozenset("0123456789.")
OPERATOR_CHARS = frozenset(op.value for op in Operator)
IGNORED_CHARS = frozenset("=")
# Unicode White_Space; str.isspace() would also accept the \x1c-\x1f separators
WHITESPACE_CHARS = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


def tokenize(text: str) -> TokenSequence:
    """
    Tokenize ``text``.

    - Runs of ``0-9`` and ``.`` become one NumberToken.
    - ``+ - * / ( )`` each become one OperatorToken.
    - Whitespace and ``=`` are skipped.

    Raises InvalidNumberLiteral or UnsupportedCharacter on the first bad input.
    """
    tokens = TokenSequence()
    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]

        if ch in NUMBER_CHARS:
            start = pos
            while pos < length and text[pos] in NUMBER_CHARS:
                pos += 1
            tokens.append(NumberToken(_parse_number(text[start:pos])))
            continue

        if ch in OPERATOR_CHARS:
            tokens.append(OperatorToken(Operator.from_char(ch)))
        elif ch in IGNORED_CHARS or ch in WHITESPACE_CHARS:
            pass
        else:
            raise UnsupportedCharacter(ch)
        pos += 1

    logger.debug("Tokenized input", tokens=str(tokens), count=len(tokens))
    return tokens


def _parse_number(literal: str) -> float:
    try:
        return float(literal)
    except ValueError:
        raise InvalidNumberLiteral(literal) from None
