"""
Expression pipeline for shunt-calc.

Runs the three stages for one input line:
TOKENIZE -> TO_POSTFIX -> EVALUATE

Each stage raises on failure, so the pipeline stops at the first stage
that fails. No state is carried from one line to the next.
"""

import structlog

from shunt_calc.config import Settings
from shunt_calc.errors import CalculatorError
from shunt_calc.evaluator import evaluate
from shunt_calc.lexer import tokenize
from shunt_calc.models import TokenSequence
from shunt_calc.shunting import to_postfix

logger = structlog.get_logger()


def calculate(line: str, strict_parens: bool = True) -> float:
    """Evaluate one line of input and return its value."""
    infix = tokenize(line.strip())
    postfix = to_postfix(infix, strict_parens=strict_parens)
    return evaluate(postfix)


def format_result(value: float, precision: int = 3) -> str:
    """Fixed-point rendering, e.g. ``7.000``; inf and nan print as such."""
    return f"{value:.{precision}f}"


class ExpressionPipeline:
    """
    Configured front end to the tokenize/convert/evaluate stages.

    Holds only settings, so the same line always produces the same output.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def run(self, line: str) -> float:
        """Evaluate ``line``, raising a CalculatorError on failure."""
        logger.debug("Evaluating line", line=line)
        return calculate(line, strict_parens=self.settings.strict_parens)

    def postfix(self, line: str) -> tuple[TokenSequence, TokenSequence]:
        """Return the infix tokens of ``line`` and their postfix order."""
        infix = tokenize(line.strip())
        return infix, to_postfix(infix, strict_parens=self.settings.strict_parens)

    def render(self, line: str) -> tuple[str, bool]:
        """
        Evaluate ``line`` into the text shown to the user.

        Returns the text and whether evaluation succeeded.
        """
        try:
            value = self.run(line)
        except CalculatorError as e:
            logger.info("Evaluation failed", line=line, kind=e.kind, error=str(e))
            return str(e), False
        return format_result(value, self.settings.precision), True
