import logging
import sys
from typing import Callable

from smartcalc.errors import DivisionByZero, InvalidExpression
from smartcalc.normalizer import normalize
from smartcalc.parser import to_postfix
from smartcalc.tokenizer import Operator, Token, TokenType, tokenize
from smartcalc.utils import Stack
from smartcalc.variables import VariableStore

logger = logging.getLogger(__name__)

# numbers are bounded only by memory, including int <-> str conversion of literals and results
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


def evaluate(code: str, variables: VariableStore) -> int:
    normalized = normalize(code)
    logger.debug("normalized: %r", normalized)
    return evaluate_postfix(to_postfix(tokenize(normalized)), variables)


def evaluate_postfix(postfix: list[Token], variables: VariableStore) -> int:
    operands: Stack[int] = Stack()
    for token in postfix:
        if token.type is TokenType.NUMBER:
            operands.push(int(token.lexeme))
        elif token.type is TokenType.IDENTIFIER:
            operands.push(variables.get(token.lexeme))
        else:
            if len(operands) < 2:
                raise InvalidExpression("Too many signs in expression")
            right = operands.pop()
            left = operands.pop()
            operands.push(eval_binary_operation(token.operator, left, right))

    if len(operands) != 1:
        raise InvalidExpression(f"Expression leaves {len(operands)} values instead of one")
    return operands.pop()


def divide(a: int, b: int) -> int:
    """Integer division truncating toward zero: -7 / 2 == -3"""
    if b == 0:
        raise DivisionByZero(f"{a} / 0")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


BinaryOperationImpl = Callable[[int, int], int]

binary_operation_impls: dict[Operator, BinaryOperationImpl] = {
    Operator.PLUS: lambda a, b: a + b,
    Operator.MINUS: lambda a, b: a - b,
    Operator.STAR: lambda a, b: a * b,
    Operator.SLASH: divide,
}


def eval_binary_operation(operator: Operator, a: int, b: int) -> int:
    impl = binary_operation_impls.get(operator)
    if impl is None:
        # a bracket that reached the output
        raise InvalidExpression(f"{operator} is not a binary operator")
    return impl(a, b)
