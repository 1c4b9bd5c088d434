import logging
from typing import Iterator, Optional

from smartcalc.errors import UnknownVariable

logger = logging.getLogger(__name__)


class VariableStore:
    """Identifier -> int bindings living for the whole session. Entries are never removed."""

    def __init__(self, initial: Optional[dict[str, int]] = None) -> None:
        self._values: dict[str, int] = dict(initial) if initial else {}

    def get(self, name: str) -> int:
        if name not in self._values:
            raise UnknownVariable(f"Unknown variable {name}")
        return self._values[name]

    def set(self, name: str, value: int) -> None:
        logger.debug("%s = %d", name, value)
        self._values[name] = value

    def set_from_variable(self, name: str, source_name: str) -> None:
        self.set(name, self.get(source_name))

    def copy(self) -> "VariableStore":
        return VariableStore(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"VariableStore({self._values!r})"
