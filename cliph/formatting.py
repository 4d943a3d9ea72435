"""Rendering expression trees as plain text and LaTeX."""

from __future__ import annotations

import math
from decimal import Decimal

from cliph.expr import Binary, BinaryOp, Expr, Function, Number, Unary, UnaryOp, Variable
from cliph.utils import clamp

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_LATEX_NAMES = {
    "sin": "\\sin",
    "cos": "\\cos",
    "tan": "\\tan",
    "log": "\\log",
    "exp": "\\exp",
    "abs": "\\left|",
}

_OP_SYMBOLS = {op: op.value for op in BinaryOp}


def _display_float(value: float) -> str:
    """Shortest round-trip decimal form, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _latex_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(clamp(int(value), _I64_MIN, _I64_MAX))
    return _display_float(value)


def format_expr_latex(expr: Expr) -> str:
    """Render ``expr`` as a LaTeX fragment."""
    match expr:
        case Number(value):
            return _latex_number(value)
        case Variable(name):
            return name
        case Unary(UnaryOp.NEG, operand):
            return f"-{format_expr_latex(operand)}"
        case Binary(op, left, right):
            a = format_expr_latex(left)
            b = format_expr_latex(right)
            if op is BinaryOp.ADD:
                return f"{a} + {b}"
            if op is BinaryOp.SUB:
                return f"{a} - {b}"
            if op is BinaryOp.MUL:
                return f"{a} {b}"
            if op is BinaryOp.DIV:
                return f"\\frac{{{a}}}{{{b}}}"
            return f"{a}^{{{b}}}"
        case Function(name, argument):
            latex_name = _LATEX_NAMES.get(name, name)
            inner = format_expr_latex(argument)
            if name == "abs":
                return f"{latex_name}{inner}\\right|"
            return f"{latex_name}\\left({inner}\\right)"
        case _:
            raise TypeError(f"Not an expression: {expr!r}")


def format_expr(expr: Expr) -> str:
    """Render ``expr`` as fully parenthesised plain text."""
    match expr:
        case Number(value):
            return _display_float(value)
        case Variable(name):
            return name
        case Unary(UnaryOp.NEG, operand):
            return f"-{format_expr(operand)}"
        case Binary(op, left, right):
            return f"({format_expr(left)} {_OP_SYMBOLS[op]} {format_expr(right)})"
        case Function(name, argument):
            return f"{name}({format_expr(argument)})"
        case _:
            raise TypeError(f"Not an expression: {expr!r}")