# cliph

A small calculator for expressions in one variable. It can:

- parse expressions such as `x^2 + 3x` or `sin(x)^2 + cos(x)^2`; simple LaTeX input such as `\frac{1}{x}`, `\sin(x)` or `$x^2$` is rewritten to plain syntax first;
- simplify them by folding constants, flattening sums and products, combining like terms and applying a few identities (such as `sin(x)^2 + cos(x)^2 = 1`);
- differentiate them with respect to a variable;
- evaluate them numerically;
- render them as LaTeX or as plain, fully parenthesised text;
- plot them to an image file over `-10 ≤ x ≤ 10`, leaving out stretches where the curve goes outside `-10 ≤ y ≤ 10`.

## Installation

```
pip install .
```

## Command line

```
cliph "x^2 + 3*x"
```

This prints a title line, then the simplified expression and its derivative with respect to `x`, both as LaTeX wrapped in `$...$`. With no expression it uses `x^2`. If the input does not parse, both lines read `Error parsing expression`.

```
cliph "sin(x)" --plot graph.png
```

`--plot PATH` also writes a graph of the expression to `PATH`; the image format follows the file extension. Run `cliph --help` for the full usage.

## Library use

```python
from cliph.parser import parse
from cliph.algebra import simplify
from cliph.diff import differentiate
from cliph.formatting import format_expr_latex, format_expr
from cliph.evaluate import evaluate

expr = parse("2x + x")
simplified = simplify(expr)              # Binary(MUL, Number(3.0), Variable("x"))
print(format_expr_latex(simplified))     # 3 x
print(format_expr(simplified))           # (3 * x)
print(format_expr(differentiate(simplified, "x")))
print(evaluate(simplified, {"x": 2.0}))  # 6.0
```

- `cliph.expr` defines the tree: `Number`, `Variable`, `Unary`, `Binary` and `Function` nodes, all subclasses of `Expr`, with the operator enums `UnaryOp` and `BinaryOp`. Nodes are immutable and hashable.
- `cliph.parser.latex_to_math_expr(latex)` rewrites LaTeX function names and `\frac{a}{b}` and drops `$` signs; `cliph.parser.parse(text)` builds the tree.
- `cliph.evaluate.evaluate(expr, variables=None)` computes a float; variables that are not given count as zero. Division by zero, overflow and domain errors give `inf`, `-inf` or `nan` rather than raising.
- `cliph.algebra.simplify(expr)` returns a simplified tree.
- `cliph.diff.differentiate(expr, var)` returns the simplified derivative. Parts it cannot differentiate (powers with a non-constant exponent, functions other than `sin`, `cos`, `exp` and `log`) come back wrapped in a `diff_not_supported(...)` function node.
- `cliph.app.analyse(text)` returns an `Analysis` with `simplified_latex` and `derivative_latex`.
- `cliph.graph.sample_points(expr)` evaluates at `x = -10, -9.9, ..., 10`; `cliph.graph.visible_segments(points, y_min, y_max)` splits points into in-range runs of two or more; `cliph.graph.plot(expr_text, path)` saves the graph and returns `False`, leaving a blank image, when the text does not parse.
- `cliph.utils.clamp(value, minimum, maximum)` limits a value to a closed range.

## Supported syntax

- Numbers: `3`, `2.5`, `.5`
- Variables: identifiers such as `x`, `y1`, `rate_2`
- Operators: `+`, `-`, `*`, `/`, `^`, and unary minus
- Implicit multiplication: `2x`, `3(x + 1)`, `x y`
- Functions: `sin`, `cos`, `tan`, `log` (natural log), `exp`, `abs`

Parse failures raise `cliph.parser.ParseError`. Evaluating an unknown function raises `cliph.evaluate.EvaluationError`.

## What it does not do

There is no interactive interface: the `cliph` command analyses one expression per run and, if asked, writes a static image. It does not show a live graph or re-render as you type.

## Running the tests

```
pip install ".[test]"
pytest
```