import enum
import re
from typing import Generic, Iterator, TypeVar

IDENTIFIER_RE = re.compile(r"[A-Za-z]+")
# ASCII digits only, int() would also take other Unicode digits
NUMBER_RE = re.compile(r"-?\d+", re.ASCII)
SIGNED_NUMBER_RE = re.compile(r"[+-]?\d+", re.ASCII)


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def is_identifier(s: str) -> bool:
    return IDENTIFIER_RE.fullmatch(s) is not None


def is_number(s: str) -> bool:
    return NUMBER_RE.fullmatch(s) is not None


def is_integer_literal(s: str) -> bool:
    """Accepts an explicit leading plus, unlike the tokenizer's number lexemes"""
    return SIGNED_NUMBER_RE.fullmatch(s) is not None


T = TypeVar("T")


class Stack(Generic[T]):
    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.pop()

    def peek(self) -> T:
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Bottom to top"""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
