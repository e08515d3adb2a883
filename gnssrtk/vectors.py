"""Basic operations on vectors given as sequences of floats."""

from __future__ import annotations

from collections.abc import Sequence


def _check_same_length(a: Sequence[float], b: Sequence[float], what: str) -> None:
    if len(a) != len(b):
        raise ValueError(f"the dimensions of the {what} vectors do not match")


def vector_add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum of two vectors of equal length."""
    _check_same_length(a, b, "additive")
    return [x + y for x, y in zip(a, b)]


def vector_sub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise difference ``a - b`` of two vectors of equal length."""
    _check_same_length(a, b, "subtraction")
    return [x - y for x, y in zip(a, b)]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors of equal length."""
    _check_same_length(a, b, "dot product")
    return sum(x * y for x, y in zip(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return (a1*b2 - a2*b1, a0*b2 - a2*b0, a0*b1 - a1*b0) for two 3-vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("the dimensions of the cross product vectors do not match")
    return [
        a[1] * b[2] - a[2] * b[1],
        a[0] * b[2] - a[2] * b[0],
        a[0] * b[1] - a[1] * b[0],
    ]