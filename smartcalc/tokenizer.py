import enum
import re
from dataclasses import dataclass

from smartcalc.errors import InvalidExpression
from smartcalc.utils import PrintableEnum, is_identifier, is_number


class Operator(PrintableEnum):
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    BRACKET_OPEN = "("
    BRACKET_CLOSE = ")"

    @property
    def sign(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        return OPERATOR_PRIORITIES[self]


# brackets only stop precedence comparisons, they are never popped by priority
BRACKET_PRIORITY = 99

OPERATOR_PRIORITIES = {
    Operator.PLUS: 0,
    Operator.MINUS: 0,
    Operator.STAR: 1,
    Operator.SLASH: 1,
    Operator.BRACKET_OPEN: BRACKET_PRIORITY,
    Operator.BRACKET_CLOSE: BRACKET_PRIORITY,
}

SIGN_TO_OPERATOR = {op.sign: op for op in Operator}


def operator_by_sign(sign: str) -> Operator:
    operator = SIGN_TO_OPERATOR.get(sign)
    if operator is None:
        raise InvalidExpression(f"Unknown operator {sign!r}")
    return operator


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    IDENTIFIER = enum.auto()
    OPERATOR = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    @property
    def operator(self) -> Operator:
        if self.type is not TokenType.OPERATOR:
            raise TypeError(f"{self} is not an operator token")
        return operator_by_sign(self.lexeme)

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def number_token(lexeme: str) -> Token:
    return Token(type=TokenType.NUMBER, lexeme=lexeme)


def identifier_token(name: str) -> Token:
    return Token(type=TokenType.IDENTIFIER, lexeme=name)


def operator_token(op: Operator) -> Token:
    return Token(type=TokenType.OPERATOR, lexeme=op.sign)


def tokenize(code: str) -> list[Token]:
    """Splits normalized code on whitespace.

    Pieces that are neither a number nor an identifier are read char by char as operators,
    so signs left fused by normalization ("--", "(-") still produce one token each.
    """
    tokens: list[Token] = []
    for piece in code.split():
        if is_number(piece):
            tokens.append(number_token(piece))
        elif is_identifier(piece):
            tokens.append(identifier_token(piece))
        else:
            for char in piece:
                tokens.append(operator_token(operator_by_sign(char)))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
