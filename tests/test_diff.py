import pytest

from cliph.diff import differentiate
from cliph.evaluate import evaluate
from cliph.expr import Binary, BinaryOp, Function, Number, Variable
from cliph.parser import parse

X = Variable("x")


def test_constant_has_zero_derivative():
    assert differentiate(Number(5.0), "x") == Number(0.0)


def test_variable_itself():
    assert differentiate(X, "x") == Number(1.0)


def test_other_variable_is_constant():
    assert differentiate(Variable("y"), "x") == Number(0.0)


def test_function_of_other_variable_vanishes():
    assert differentiate(parse("sin(y)"), "x") == Number(0.0)


def test_variable_exponent_not_supported():
    expr = Binary(BinaryOp.POW, X, X)
    assert differentiate(expr, "x") == Function("diff_not_supported", expr)


def test_unknown_function_not_supported():
    expr = Function("tan", X)
    assert differentiate(expr, "x") == Function("diff_not_supported", expr)


def test_derivative_of_sin_is_cos():
    assert differentiate(Function("sin", X), "x") == Function("cos", X)


@pytest.mark.parametrize(
    "text",
    [
        "x^3 + 2x",
        "sin(x) * x",
        "exp(2x)",
        "log(x^2 + 1)",
        "(x + 1) / (x^2 + 1)",
        "cos(x)^2",
        "-(x^2 - 3x)",
        "x - sin(x)",
    ],
)
@pytest.mark.parametrize("point", [0.3, 1.7, -2.2])
def test_matches_numeric_derivative(text, point):
    expr = parse(text)
    derivative = differentiate(expr, "x")
    h = 1e-6
    numeric = (evaluate(expr, {"x": point + h}) - evaluate(expr, {"x": point - h})) / (2 * h)
    assert evaluate(derivative, {"x": point}) == pytest.approx(numeric, abs=1e-5)


def test_other_variable_held_constant():
    expr = parse("x*y + y^2")
    derivative = differentiate(expr, "x")
    for y in (0.5, 2.0, -3.0):
        assert evaluate(derivative, {"x": 1.3, "y": y}) == pytest.approx(y)