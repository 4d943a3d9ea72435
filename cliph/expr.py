"""Expression tree for the symbolic calculator."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class UnaryOp(enum.Enum):
    """Prefix operators."""

    NEG = "-"


class BinaryOp(enum.Enum):
    """Infix operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class Expr:
    """Base class of every expression node."""

    __slots__ = ()


@dataclass(frozen=True, eq=False, slots=True)
class Number(Expr):
    """A numeric constant. NaN compares equal to NaN so trees stay hashable."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        if math.isnan(self.value) and math.isnan(other.value):
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        if math.isnan(self.value):
            return 0
        return hash(self.value)


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """A named variable."""

    name: str


@dataclass(frozen=True, slots=True)
class Unary(Expr):
    """A prefix operator applied to one operand."""

    op: UnaryOp
    operand: Expr


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """An infix operator applied to two operands."""

    op: BinaryOp
    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class Function(Expr):
    """A named function applied to a single argument."""

    name: str
    argument: Expr