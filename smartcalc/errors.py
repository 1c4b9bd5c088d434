import enum
from dataclasses import dataclass, field

from smartcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INVALID_EXPRESSION = enum.auto()
    UNKNOWN_VARIABLE = enum.auto()
    INVALID_ASSIGNMENT = enum.auto()
    INVALID_IDENTIFIER = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    UNKNOWN_COMMAND = enum.auto()


@dataclass
class CalcError(Exception):
    kind: ErrorKind
    errmsg: str = ""

    def __str__(self) -> str:
        if self.errmsg:
            return f"[{self.kind}] {self.errmsg}"
        return f"[{self.kind}]"


@dataclass
class InvalidExpression(CalcError):
    kind: ErrorKind = field(default=ErrorKind.INVALID_EXPRESSION, init=False)


@dataclass
class UnknownVariable(CalcError):
    kind: ErrorKind = field(default=ErrorKind.UNKNOWN_VARIABLE, init=False)


@dataclass
class InvalidAssignment(CalcError):
    kind: ErrorKind = field(default=ErrorKind.INVALID_ASSIGNMENT, init=False)


@dataclass
class InvalidIdentifier(CalcError):
    kind: ErrorKind = field(default=ErrorKind.INVALID_IDENTIFIER, init=False)


@dataclass
class DivisionByZero(CalcError):
    kind: ErrorKind = field(default=ErrorKind.DIVISION_BY_ZERO, init=False)


@dataclass
class UnknownCommand(CalcError):
    kind: ErrorKind = field(default=ErrorKind.UNKNOWN_COMMAND, init=False)
