import logging

from smartcalc.errors import InvalidExpression
from smartcalc.tokenizer import Operator, Token, TokenType, operator_token, untokenize
from smartcalc.utils import Stack

logger = logging.getLogger(__name__)


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Shunting-yard conversion of infix tokens to reverse Polish notation.

    Operators of equal priority are left-associative: the stack top is flushed before the new
    operator is pushed, so "10 - 2 - 3" becomes "10 2 - 3 -".
    """
    postfix: list[Token] = []
    operators: Stack[Operator] = Stack()

    for token in tokens:
        if token.type is not TokenType.OPERATOR:
            postfix.append(token)
            continue

        current = token.operator
        if current is Operator.BRACKET_CLOSE:
            _flush_bracket(operators, postfix)
        elif not operators or operators.peek() is Operator.BRACKET_OPEN:
            operators.push(current)
        elif current is Operator.BRACKET_OPEN:
            operators.push(current)
        elif current.priority > operators.peek().priority:
            operators.push(current)
        else:
            while (
                operators
                and operators.peek() is not Operator.BRACKET_OPEN
                and operators.peek().priority >= current.priority
            ):
                postfix.append(operator_token(operators.pop()))
            operators.push(current)

    while operators:
        remaining = operators.pop()
        if remaining is Operator.BRACKET_OPEN:
            raise InvalidExpression("Left brace without right brace")
        postfix.append(operator_token(remaining))

    logger.debug("postfix: %s", untokenize(postfix))
    return postfix


def _flush_bracket(operators: Stack[Operator], postfix: list[Token]) -> None:
    """Moves operators to the output up to the matching open bracket, which is discarded"""
    while True:
        if not operators:
            raise InvalidExpression("Right brace without left brace")
        top = operators.pop()
        if top is Operator.BRACKET_OPEN:
            return
        postfix.append(operator_token(top))
