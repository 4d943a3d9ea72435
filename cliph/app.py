"""Command-line front end: simplify, differentiate and plot an expression."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from cliph.algebra import simplify
from cliph.diff import differentiate
from cliph.formatting import format_expr_latex
from cliph.graph import plot
from cliph.parser import ParseError, latex_to_math_expr, parse

TITLE = "Cliph – Graphing Calculator"
DEFAULT_EXPRESSION = "x^2"
PARSE_ERROR_MESSAGE = "Error parsing expression"


@dataclass(frozen=True)
class Analysis:
    """LaTeX renderings of an expression's simplified form and derivative."""

    simplified_latex: str
    derivative_latex: str


def analyse(text: str) -> Analysis:
    """Simplify ``text`` and differentiate it with respect to ``x``."""
    try:
        expr = parse(latex_to_math_expr(text))
    except ParseError:
        return Analysis(PARSE_ERROR_MESSAGE, PARSE_ERROR_MESSAGE)
    simplified = simplify(expr)
    derivative = differentiate(simplified, "x")
    return Analysis(
        f"${format_expr_latex(simplified)}$",
        f"${format_expr_latex(derivative)}$",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the analysis of an expression and optionally plot it."""
    parser = argparse.ArgumentParser(prog="cliph", description=TITLE)
    parser.add_argument(
        "expression",
        nargs="?",
        default=DEFAULT_EXPRESSION,
        help="expression in x (e.g., x^2 + 3*x)",
    )
    parser.add_argument("--plot", metavar="PATH", help="write the graph to an image file")
    args = parser.parse_args(argv)

    analysis = analyse(args.expression)
    print(TITLE)
    print("Simplified expression:")
    print(analysis.simplified_latex)
    print("Derivative w.r.t x:")
    print(analysis.derivative_latex)
    if args.plot:
        plot(args.expression, args.plot)
    return 0