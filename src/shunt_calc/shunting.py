"""
Shunting-yard converter for shunt-calc.

Reorders an infix TokenSequence into postfix (Reverse Polish) order,
resolving precedence and parentheses. An incoming operator only pops
operators of strictly higher precedence; equal precedence stays stacked,
so ``10-2-3`` reduces as ``10-(2-3)``.
"""

import structlog

from shunt_calc.errors import UnbalancedParentheses
from shunt_calc.models import NumberToken, Operator, OperatorToken, TokenSequence
from shunt_calc.stack import Stack

logger = structlog.get_logger()


def to_postfix(infix: TokenSequence, strict_parens: bool = True) -> TokenSequence:
    """
    Convert ``infix`` to postfix order.

    A ``)`` without a matching ``(`` always raises UnbalancedParentheses.
    A ``(`` still open at end of input raises too when ``strict_parens`` is
    set; otherwise it is dropped and the expression is read as if the
    parenthesis were not there.
    """
    operators: Stack[Operator] = Stack()
    output = TokenSequence()

    for token in infix:
        if isinstance(token, NumberToken):
            output.append(token)
            continue

        op = token.op
        if op is Operator.PAREN_OPEN:
            operators.push(op)
        elif op is Operator.PAREN_CLOSE:
            while True:
                if operators.is_empty():
                    raise UnbalancedParentheses(infix)
                top = operators.pop()
                if top is Operator.PAREN_OPEN:
                    break
                output.append(OperatorToken(top))
        else:
            while not operators.is_empty() and operators.peek().precedence > op.precedence:
                output.append(OperatorToken(operators.pop()))
            operators.push(op)

    for op in operators.drain():
        if op is Operator.PAREN_OPEN:
            if strict_parens:
                raise UnbalancedParentheses(infix)
            logger.debug("Dropping unclosed parenthesis")
            continue
        output.append(OperatorToken(op))

    logger.debug("Converted to postfix", postfix=str(output))
    return output
