"""
Error taxonomy for shunt-calc.

Every error is terminal for the current input line only. ``str(error)`` is
the single diagnostic line shown to the user.
"""

from shunt_calc.models import TokenSequence


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    kind = "CalculatorError"


# =============================================================================
# Lexer errors
# =============================================================================

class LexError(CalculatorError):
    """Raised when the input line cannot be tokenized."""
    kind = "LexError"


class InvalidNumberLiteral(LexError):
    """A run of digits and dots that is not a valid float, e.g. ``1.2.3``."""
    kind = "InvalidNumberLiteral"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{self.kind}: `{text}`")


class UnsupportedCharacter(LexError):
    """A character outside digits, dots, operators, whitespace and ``=``."""
    kind = "UnsupportedCharacter"

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"{self.kind}: `{char}`")


# =============================================================================
# Conversion errors
# =============================================================================

class ConversionError(CalculatorError):
    """Raised when infix tokens cannot be reordered to postfix."""
    kind = "ConversionError"


class UnbalancedParentheses(ConversionError):
    """A parenthesis without a partner. Carries the infix sequence."""
    kind = "UnbalancedParentheses"

    def __init__(self, tokens: TokenSequence):
        self.tokens = tokens
        super().__init__(f"{self.kind}: {tokens}")


# =============================================================================
# Evaluation errors
# =============================================================================

class EvalError(CalculatorError):
    """Raised when a postfix sequence cannot be reduced to one value."""
    kind = "EvalError"


class StackUnderflow(EvalError):
    """An operator was reached with fewer than two pending operands."""
    kind = "StackUnderflow"

    def __init__(self, tokens: TokenSequence):
        self.tokens = tokens
        super().__init__(f"{self.kind}: {tokens} (not enough operands for an operator)")


class MalformedExpression(EvalError):
    """Operands and operators did not balance out to a single value."""
    kind = "MalformedExpression"

    def __init__(self, tokens: TokenSequence, detail: str):
        self.tokens = tokens
        self.detail = detail
        super().__init__(f"{self.kind}: {tokens} ({detail})")
