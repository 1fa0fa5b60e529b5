"""
Postfix evaluator for shunt-calc.

Reduces a postfix TokenSequence to a single float with a value stack, and
in doing so verifies that the sequence was a well-formed postfix expression.
"""

import structlog

from shunt_calc.errors import MalformedExpression, StackUnderflow
from shunt_calc.models import NumberToken, TokenSequence
from shunt_calc.stack import Stack

logger = structlog.get_logger()


def evaluate(postfix: TokenSequence) -> float:
    """
    Evaluate ``postfix`` and return its value.

    Division by zero is not an error: it yields inf or nan like any IEEE
    float division.

    Raises:
        StackUnderflow: an operator found fewer than two operands.
        MalformedExpression: the stack did not end with exactly one value.
    """
    values: Stack[float] = Stack()

    for token in postfix:
        if isinstance(token, NumberToken):
            values.push(token.value)
            continue

        if not token.op.is_arithmetic:
            raise MalformedExpression(postfix, f"unexpected `{token.op}` in postfix sequence")
        if len(values) < 2:
            raise StackUnderflow(postfix)

        y = values.pop()
        x = values.pop()
        values.push(token.op.apply(x, y))

    if len(values) != 1:
        raise MalformedExpression(postfix, f"{len(values)} values left on the stack")

    result = values.pop()
    logger.debug("Evaluated postfix", postfix=str(postfix), result=result)
    return result
