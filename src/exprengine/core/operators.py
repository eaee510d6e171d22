"""Binary operator table.

Built once at import and shared read-only by every parser instance.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from types import MappingProxyType

from . import arithmetic

__all__ = [
    "OPERATORS",
    "Associativity",
    "OperatorDescriptor",
    "get_operator",
    "should_pop",
]


class Associativity(StrEnum):
    """Grouping of consecutive operators with equal precedence."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True, slots=True)
class OperatorDescriptor:
    """Static description of a binary operator.

    Attributes:
        symbol: Operator character as written in expressions
        precedence: Binding strength (higher binds tighter)
        associativity: LEFT or RIGHT
        function: Scale-aware arithmetic, called as function(left, right, scale)
    """

    symbol: str
    precedence: int
    associativity: Associativity
    function: Callable[[Decimal, Decimal, int], Decimal]


OPERATORS: MappingProxyType[str, OperatorDescriptor] = MappingProxyType(
    {
        "+": OperatorDescriptor("+", 1, Associativity.LEFT, arithmetic.add),
        "-": OperatorDescriptor("-", 1, Associativity.LEFT, arithmetic.subtract),
        "*": OperatorDescriptor("*", 2, Associativity.LEFT, arithmetic.multiply),
        "/": OperatorDescriptor("/", 2, Associativity.LEFT, arithmetic.divide),
        "^": OperatorDescriptor("^", 3, Associativity.RIGHT, arithmetic.power),
    }
)


def get_operator(symbol: str) -> OperatorDescriptor | None:
    """Look up an operator by symbol, None if unknown."""
    return OPERATORS.get(symbol)


def should_pop(current: OperatorDescriptor, top: OperatorDescriptor) -> bool:
    """Decide whether the stacked operator leaves before *current* is pushed.

    Left-associative operators pop anything of equal or higher precedence;
    right-associative ones only strictly higher, which makes
    ``2 ^ 3 ^ 2`` group as ``2 ^ (3 ^ 2)``.
    """
    if current.associativity is Associativity.LEFT:
        return current.precedence <= top.precedence
    return current.precedence < top.precedence
