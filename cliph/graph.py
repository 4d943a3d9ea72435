"""Sampling and plotting a function of ``x``."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from cliph.evaluate import evaluate
from cliph.expr import Expr
from cliph.parser import ParseError, parse

X_MIN, X_MAX = -10.0, 10.0
Y_MIN, Y_MAX = -10.0, 10.0
_STEPS = 100

Point = tuple[float, float]


def sample_points(expr: Expr) -> list[Point]:
    """Evaluate ``expr`` at x = -10, -9.9, ..., 10."""
    return [
        (x, evaluate(expr, {"x": x}))
        for x in (i / 10.0 for i in range(-_STEPS, _STEPS + 1))
    ]


def visible_segments(points: Iterable[Point], y_min: float, y_max: float) -> list[list[Point]]:
    """Split ``points`` into runs whose y lies within the range.

    Runs of a single point are dropped, since they cannot form a line.
    """
    segments: list[list[Point]] = []
    current: list[Point] = []
    for point in points:
        y = point[1]
        if not math.isnan(y) and y_min <= y <= y_max:
            current.append(point)
            continue
        if len(current) > 1:
            segments.append(current)
        current = []
    if len(current) > 1:
        segments.append(current)
    return segments


def plot(expr_text: str, path: str | os.PathLike[str]) -> bool:
    """Draw the graph of ``expr_text`` into an image file at ``path``.

    Returns False, leaving a blank image, when the text does not parse.
    """
    figure = Figure(figsize=(6, 4), dpi=100, facecolor="white")
    FigureCanvasAgg(figure)
    try:
        expr = parse(expr_text)
    except ParseError:
        figure.savefig(path)
        return False

    points = sample_points(expr)
    axes = figure.add_subplot()
    axes.set_title("f(x)")
    axes.set_xlim(X_MIN, X_MAX)
    axes.set_ylim(Y_MIN, Y_MAX)
    axes.grid(True)
    axes.plot([X_MIN, X_MAX], [0.0, 0.0], color="black", linewidth=1)
    axes.plot([0.0, 0.0], [Y_MIN, Y_MAX], color="black", linewidth=1)
    for segment in visible_segments(points, Y_MIN, Y_MAX):
        xs, ys = zip(*segment)
        axes.plot(xs, ys, color="red")
    figure.savefig(path)
    return True