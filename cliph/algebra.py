"""Algebraic simplification of expression trees."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from cliph.evaluate import evaluate
from cliph.expr import Binary, BinaryOp, Expr, Function, Number, Unary, UnaryOp, Variable

_EPSILON = 1e-12
_ZERO = Number(0.0)
_ONE = Number(1.0)
_TWO = Number(2.0)
_EVALUABLE = frozenset({"sin", "cos", "tan", "log", "exp", "abs"})


def simplify(expr: Expr) -> Expr:
    """Return a simplified, equivalent form of ``expr``."""
    match expr:
        case Number() | Variable():
            return expr
        case Unary(op, operand):
            return _simplify_unary(op, simplify(operand))
        case Binary(op, left, right):
            return _simplify_binary(op, simplify(left), simplify(right))
        case Function(name, argument):
            return _simplify_function(name, simplify(argument))
        case _:
            raise TypeError(f"Not an expression: {expr!r}")


def _negate(expr: Expr) -> Expr:
    return simplify(Unary(UnaryOp.NEG, expr))


def _simplify_unary(op: UnaryOp, operand: Expr) -> Expr:
    if op is UnaryOp.NEG:
        match operand:
            case Number(value):
                return Number(-value)
            case Unary(UnaryOp.NEG, inner):
                return inner
            case Binary(BinaryOp.ADD, a, b):
                # -(a + b) = (-a) + (-b)
                return Binary(BinaryOp.ADD, _negate(a), _negate(b))
            case Binary(BinaryOp.SUB, a, b):
                # -(a - b) = (-a) + b
                return Binary(BinaryOp.ADD, _negate(a), b)
    return Unary(op, operand)


def _simplify_binary(op: BinaryOp, a: Expr, b: Expr) -> Expr:
    if op is BinaryOp.ADD:
        return _simplify_sum([*_flatten(BinaryOp.ADD, a), *_flatten(BinaryOp.ADD, b)])
    if op is BinaryOp.MUL:
        return _simplify_product([*_flatten(BinaryOp.MUL, a), *_flatten(BinaryOp.MUL, b)])
    if op is BinaryOp.SUB:
        return _simplify_difference(a, b)
    if op is BinaryOp.DIV:
        return _simplify_quotient(a, b)
    return _simplify_power(a, b)


def _is_pythagorean_pair(first: Expr, second: Expr) -> bool:
    match first, second:
        case (
            Binary(BinaryOp.POW, Function(f1, arg1), Number() as e1),
            Binary(BinaryOp.POW, Function(f2, arg2), Number() as e2),
        ):
            return (
                e1 == _TWO
                and e2 == _TWO
                and {f1, f2} == {"sin", "cos"}
                and arg1 == arg2
            )
    return False


def _simplify_sum(terms: list[Expr]) -> Expr:
    if len(terms) == 2 and _is_pythagorean_pair(*terms):
        return _ONE
    total, others = _partition_constants(_combine_like_terms(terms))
    result = ([Number(total)] if abs(total) > _EPSILON else []) + others
    if not result:
        return _ZERO
    return _fold(BinaryOp.ADD, result)


def _simplify_product(factors: list[Expr]) -> Expr:
    product = 1.0
    others: list[Expr] = []
    for factor in factors:
        if isinstance(factor, Number):
            product *= factor.value
        else:
            others.append(factor)
    if product == 0.0:
        return _ZERO
    result = ([Number(product)] if abs(product - 1.0) > _EPSILON else []) + others
    if not result:
        return _ONE
    return _fold(BinaryOp.MUL, result)


def _simplify_difference(a: Expr, b: Expr) -> Expr:
    if a == b:
        return _ZERO
    if isinstance(b, Binary) and b.op is BinaryOp.ADD:
        negated = simplify(Binary(BinaryOp.ADD, _negate(b.left), _negate(b.right)))
        return simplify(Binary(BinaryOp.ADD, a, negated))
    return simplify(Binary(BinaryOp.ADD, a, _negate(b)))


def _simplify_quotient(a: Expr, b: Expr) -> Expr:
    if isinstance(a, Number) and isinstance(b, Number):
        return Number(evaluate(Binary(BinaryOp.DIV, a, b)))
    if b == _ONE:
        return a
    if a == _ZERO:
        return _ZERO
    return Binary(BinaryOp.DIV, a, b)


def _simplify_power(a: Expr, b: Expr) -> Expr:
    if b == _ZERO:
        return _ONE
    if b == _ONE:
        return a
    return Binary(BinaryOp.POW, a, b)


def _simplify_function(name: str, argument: Expr) -> Expr:
    node = Function(name, argument)
    if not isinstance(argument, Number) or name not in _EVALUABLE:
        return node
    if name == "log" and not argument.value > 0.0:
        return node
    return Number(evaluate(node))


def _flatten(op: BinaryOp, expr: Expr) -> list[Expr]:
    if isinstance(expr, Binary) and expr.op is op:
        return [*_flatten(op, expr.left), *_flatten(op, expr.right)]
    return [expr]


def _fold(op: BinaryOp, exprs: Iterable[Expr]) -> Expr:
    return reduce(lambda left, right: Binary(op, left, right), exprs)


def _partition_constants(terms: Iterable[Expr]) -> tuple[float, list[Expr]]:
    total = 0.0
    others: list[Expr] = []
    for term in terms:
        if isinstance(term, Number):
            total += term.value
        else:
            others.append(term)
    return total, others


def _normalize_double_neg(expr: Expr) -> Expr:
    match expr:
        case Unary(UnaryOp.NEG, Unary(UnaryOp.NEG, inner)):
            return _normalize_double_neg(inner)
        case Unary(UnaryOp.NEG, inner):
            return Unary(UnaryOp.NEG, _normalize_double_neg(inner))
        case Binary(op, left, right):
            return Binary(op, _normalize_double_neg(left), _normalize_double_neg(right))
    return expr


def _extract_coefficient(expr: Expr) -> tuple[float, Expr] | None:
    """Split ``expr`` into a numeric coefficient and the remaining base."""
    expr = _normalize_double_neg(expr)
    match expr:
        case Number(value):
            return value, _ONE
        case Unary(UnaryOp.NEG, inner):
            found = _extract_coefficient(inner)
            if found is None:
                return None
            return -found[0], found[1]
        case Binary(BinaryOp.MUL, left, right):
            left_part = _extract_coefficient(left)
            right_part = _extract_coefficient(right)
            if left_part is not None and right_part is not None:
                (lc, lb), (rc, rb) = left_part, right_part
                if lb == _ONE:
                    base = rb
                elif rb == _ONE:
                    base = lb
                else:
                    base = Binary(BinaryOp.MUL, lb, rb)
                return lc * rc, base
            if left_part is not None:
                lc, lb = left_part
                return lc, right if lb == _ONE else Binary(BinaryOp.MUL, lb, right)
            if right_part is not None:
                rc, rb = right_part
                return rc, left if rb == _ONE else Binary(BinaryOp.MUL, left, rb)
            return None
    return None


def _combine_like_terms(terms: Iterable[Expr]) -> list[Expr]:
    counts: dict[Expr, float] = {}
    for term in terms:
        found = _extract_coefficient(term)
        coefficient, base = found if found is not None else (1.0, term)
        counts[base] = counts.get(base, 0.0) + coefficient

    combined: list[Expr] = []
    constants: list[Expr] = []
    for base, coefficient in counts.items():
        if abs(coefficient) < _EPSILON:
            continue
        if base == _ONE:
            constants.append(Number(coefficient))
        elif coefficient == 1.0:
            combined.append(base)
        else:
            combined.append(Binary(BinaryOp.MUL, Number(coefficient), base))
    return combined + constants