"""Numeric evaluation of expression trees with IEEE float semantics."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping

from cliph.expr import Binary, BinaryOp, Expr, Function, Number, Unary, UnaryOp, Variable


class EvaluationError(ValueError):
    """Raised when an expression cannot be evaluated."""


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.trunc(x) and int(x) % 2 == 1


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def _trig(fn: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return math.nan

    return apply


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": _trig(math.sin),
    "cos": _trig(math.cos),
    "tan": _trig(math.tan),
    "log": _log,
    "exp": _exp,
    "abs": abs,
}

_BINARY: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.ADD: lambda a, b: a + b,
    BinaryOp.SUB: lambda a, b: a - b,
    BinaryOp.MUL: lambda a, b: a * b,
    BinaryOp.DIV: _divide,
    BinaryOp.POW: _power,
}


def evaluate(expr: Expr, variables: Mapping[str, float] | None = None) -> float:
    """Evaluate ``expr``; unbound variables count as zero."""
    env: Mapping[str, float] = variables if variables is not None else {}
    match expr:
        case Number(value):
            return value
        case Variable(name):
            return float(env.get(name, 0.0))
        case Unary(UnaryOp.NEG, operand):
            return -evaluate(operand, env)
        case Binary(op, left, right):
            return _BINARY[op](evaluate(left, env), evaluate(right, env))
        case Function(name, argument):
            x = evaluate(argument, env)
            try:
                fn = _FUNCTIONS[name]
            except KeyError:
                raise EvaluationError(f"Unknown function: {name}") from None
            return float(fn(x))
        case _:
            raise EvaluationError(f"Not an expression: {expr!r}")