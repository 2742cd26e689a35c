"""Conditions used to filter and count roll results.

A condition is an optional comparator followed by an integer literal:
``">3"``, ``"<=2"``, ``"=6"`` or just ``"6"`` (equality). Comparators are
dispatched through the Comparator enumeration; condition text is never
evaluated as code.
"""

from __future__ import annotations

import enum
import operator
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from DiceRoll.logging import get_logger
from DiceRoll.metrics import inc_counter

_log = get_logger(__name__)

_CONDITION_RE = re.compile(r"^\s*(?P<op>[<>=]+)?\s*(?P<value>[+\-]?\d+)\s*$")


class InvalidCondition(ValueError):
    """Raised when a condition string cannot be parsed."""

    def __init__(self, condition: str, reason: str):
        super().__init__(f"Invalid condition {condition!r}: {reason}")
        self.condition = condition
        self.reason = reason


class Comparator(enum.Enum):
    EQ = "="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    @property
    def fn(self) -> Callable[[int, int], bool]:
        return _COMPARATOR_FNS[self]


_COMPARATOR_FNS: dict[Comparator, Callable[[int, int], bool]] = {
    Comparator.EQ: operator.eq,
    Comparator.GT: operator.gt,
    Comparator.LT: operator.lt,
    Comparator.GE: operator.ge,
    Comparator.LE: operator.le,
}


@dataclass(frozen=True)
class Condition:
    comparator: Comparator
    value: int

    def matches(self, result: int) -> bool:
        return self.comparator.fn(result, self.value)

    def __str__(self) -> str:
        return f"{self.comparator.value}{self.value}"


def parse_condition(text: str) -> Condition:
    """Parse condition text into a Condition.

    A missing operator means equality. Raises InvalidCondition when there is
    no integer literal or the operator is not one of = > < >= <=.
    """
    if not isinstance(text, str):
        _reject(repr(text), "condition must be a string")
    m = _CONDITION_RE.match(text)
    if not m:
        _reject(text, "expected an optional comparator followed by an integer")
    op = m.group("op") or Comparator.EQ.value
    try:
        comparator = Comparator(op)
    except ValueError:
        _reject(text, f"unsupported comparator {op!r}")
    return Condition(comparator=comparator, value=int(m.group("value")))


def _reject(text: str, reason: str) -> NoReturn:
    inc_counter("dice.condition.rejected")
    _log.warning("dice.condition.rejected", condition=text, reason=reason)
    raise InvalidCondition(text, reason)
