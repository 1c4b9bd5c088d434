import logging
from typing import Optional

from smartcalc.errors import (
    CalcError,
    ErrorKind,
    InvalidAssignment,
    InvalidIdentifier,
    UnknownCommand,
)
from smartcalc.runtime import evaluate
from smartcalc.utils import is_identifier, is_integer_literal
from smartcalc.variables import VariableStore

logger = logging.getLogger(__name__)

HELP_TEXT = """The program calculates expressions with integer numbers and variables.
Supported operators: + - * / and parentheses, e.g. 8 * 3 + 12 * (4 - 2)
Unary and binary minuses are supported, e.g. 2 -- 2 = 4
Division truncates toward zero, e.g. -7 / 2 = -3
Assign variables with name = value or name = other, names are latin letters only
Commands: /help shows this message, /exit quits"""

EXIT_TEXT = "Bye!"

ERROR_MESSAGES = {
    ErrorKind.INVALID_EXPRESSION: "Invalid expression",
    ErrorKind.UNKNOWN_VARIABLE: "Unknown variable",
    ErrorKind.INVALID_ASSIGNMENT: "Invalid assignment",
    ErrorKind.INVALID_IDENTIFIER: "Invalid identifier",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero",
    ErrorKind.UNKNOWN_COMMAND: "Unknown command",
}


def parse_assignment(line: str) -> tuple[str, str]:
    """Splits "a = b" into ("a", "b"), checking there is exactly one "=" and the target is a valid name"""
    parts = line.replace(" ", "").split("=")
    if len(parts) != 2:
        raise InvalidAssignment(f"Expected exactly one '=' in {line!r}")
    target, source = parts
    if not is_identifier(target):
        raise InvalidIdentifier(f"Invalid assignment target {target!r}")
    return target, source


class Session:
    def __init__(self, variables: Optional[VariableStore] = None) -> None:
        self.variables = variables if variables is not None else VariableStore()
        self.finished = False

    def process(self, line: str) -> Optional[str]:
        """Handles one input line, returns the text to print or None"""
        try:
            return self._process(line)
        except CalcError as e:
            logger.debug("Error processing %r: %s", line, e)
            return ERROR_MESSAGES[e.kind]

    def _process(self, line: str) -> Optional[str]:
        stripped = line.strip()
        if not stripped:
            return None
        if stripped.startswith("/"):
            return self._command(stripped)
        if "=" in stripped:
            self._assign(stripped)
            return None
        if is_identifier(stripped):
            return str(self.variables.get(stripped))
        return str(evaluate(stripped, self.variables))

    def _command(self, command: str) -> str:
        if command == "/help":
            return HELP_TEXT
        elif command == "/exit":
            self.finished = True
            return EXIT_TEXT
        else:
            raise UnknownCommand(command)

    def _assign(self, line: str) -> None:
        target, source = parse_assignment(line)
        if is_identifier(source):
            self.variables.set_from_variable(target, source)
        elif is_integer_literal(source):
            self.variables.set(target, int(source))
        else:
            raise InvalidAssignment(f"Invalid assignment value {source!r}")
