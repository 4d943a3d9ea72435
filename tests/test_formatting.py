import math

import pytest

from cliph.expr import Binary, BinaryOp, Function, Number, Unary, UnaryOp, Variable
from cliph.formatting import format_expr, format_expr_latex
from cliph.parser import parse

X = Variable("x")


def test_plain_binary_is_parenthesised():
    assert format_expr(Binary(BinaryOp.ADD, X, Number(2))) == "(x + 2)"


def test_plain_function_and_negation():
    text = format_expr(Unary(UnaryOp.NEG, Function("sin", X)))
    assert text == "-" + format_expr(Function("sin", X))
    assert text.endswith("(x)")


@pytest.mark.parametrize("value", [1e20, 1e-7, 123456.789, 0.1, 2.0])
def test_plain_numbers_round_trip_without_exponent(value):
    text = format_expr(Number(value))
    assert "e" not in text
    assert float(text) == value


def test_plain_special_numbers():
    assert float(format_expr(Number(math.inf))) == math.inf
    assert float(format_expr(Number(-math.inf))) == -math.inf
    assert math.isnan(float(format_expr(Number(math.nan))))


@pytest.mark.parametrize(
    "expr",
    [
        Binary(BinaryOp.ADD, X, Number(2)),
        Binary(BinaryOp.MUL, Number(3.5), Function("cos", X)),
        Binary(BinaryOp.DIV, Binary(BinaryOp.SUB, X, Variable("y")), Number(4)),
        Binary(BinaryOp.POW, Function("exp", X), Number(2)),
        Unary(UnaryOp.NEG, Variable("z")),
    ],
)
def test_plain_text_parses_back(expr):
    assert parse(format_expr(expr)) == expr


def test_latex_integer_valued_numbers_drop_fraction():
    assert format_expr_latex(Number(7.0)) == "7"
    assert format_expr_latex(Number(-0.0)) == "0"
    assert format_expr_latex(Number(2.5)) == "2.5"


def test_latex_large_integer_saturates():
    assert format_expr_latex(Number(1e30)) == str(2**63 - 1)


def test_latex_fraction():
    assert format_expr_latex(Binary(BinaryOp.DIV, X, Number(2))) == "\\frac{x}{2}"


def test_latex_functions():
    assert format_expr_latex(Function("sin", X)) == "\\sin\\left(x\\right)"
    assert format_expr_latex(Function("abs", X)) == "\\left|x\\right|"
    assert format_expr_latex(Function("f", X)) == "f\\left(x\\right)"


def test_latex_power_and_product():
    assert format_expr_latex(Binary(BinaryOp.POW, X, Number(2))) == "x^{2}"
    product = format_expr_latex(Binary(BinaryOp.MUL, Number(3), X))
    assert product.split(" ") == ["3", "x"]