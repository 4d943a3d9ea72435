"""Small helpers."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Limit ``value`` to the closed range from ``minimum`` to ``maximum``."""
    if value < minimum:  # type: ignore[operator]
        return minimum
    if value > maximum:  # type: ignore[operator]
        return maximum
    return value