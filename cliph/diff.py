"""Symbolic differentiation of expression trees."""

from __future__ import annotations

from cliph.algebra import simplify
from cliph.expr import Binary, BinaryOp, Expr, Function, Number, Unary, UnaryOp, Variable

UNSUPPORTED = "diff_not_supported"


def differentiate(expr: Expr, var: str) -> Expr:
    """Return the simplified derivative of ``expr`` with respect to ``var``.

    Parts that cannot be differentiated are wrapped in a
    ``diff_not_supported`` function node.
    """
    return simplify(_derivative(expr, var))


def _unsupported(expr: Expr) -> Expr:
    return Function(UNSUPPORTED, expr)


def _derivative(expr: Expr, var: str) -> Expr:
    match expr:
        case Number():
            return Number(0.0)
        case Variable(name):
            return Number(1.0 if name == var else 0.0)
        case Unary(UnaryOp.NEG, operand):
            return Unary(UnaryOp.NEG, differentiate(operand, var))
        case Binary(op, a, b):
            return _binary_derivative(expr, op, a, b, var)
        case Function(name, argument):
            return _function_derivative(expr, name, argument, var)
        case _:
            raise TypeError(f"Not an expression: {expr!r}")


def _binary_derivative(expr: Expr, op: BinaryOp, a: Expr, b: Expr, var: str) -> Expr:
    if op is BinaryOp.ADD:
        return Binary(BinaryOp.ADD, differentiate(a, var), differentiate(b, var))
    if op is BinaryOp.SUB:
        return Binary(BinaryOp.SUB, differentiate(a, var), differentiate(b, var))
    if op is BinaryOp.MUL:
        return Binary(
            BinaryOp.ADD,
            Binary(BinaryOp.MUL, differentiate(a, var), b),
            Binary(BinaryOp.MUL, a, differentiate(b, var)),
        )
    if op is BinaryOp.DIV:
        numerator = Binary(
            BinaryOp.SUB,
            Binary(BinaryOp.MUL, differentiate(a, var), b),
            Binary(BinaryOp.MUL, a, differentiate(b, var)),
        )
        return Binary(BinaryOp.DIV, numerator, Binary(BinaryOp.POW, b, Number(2.0)))
    # Power rule, only for constant exponents.
    if isinstance(b, Number):
        return Binary(
            BinaryOp.MUL,
            Binary(
                BinaryOp.MUL,
                Number(b.value),
                Binary(BinaryOp.POW, a, Number(b.value - 1.0)),
            ),
            differentiate(a, var),
        )
    return _unsupported(expr)


def _function_derivative(expr: Expr, name: str, argument: Expr, var: str) -> Expr:
    inner = differentiate(argument, var)
    if name == "sin":
        return Binary(BinaryOp.MUL, Function("cos", argument), inner)
    if name == "cos":
        return Binary(
            BinaryOp.MUL, Unary(UnaryOp.NEG, Function("sin", argument)), inner
        )
    if name == "exp":
        return Binary(BinaryOp.MUL, Function("exp", argument), inner)
    if name == "log":
        return Binary(BinaryOp.DIV, inner, argument)
    return _unsupported(expr)