"""Summary statistics extracted from a finished forest."""

from __future__ import annotations

from math import prod
from typing import Iterable, Sequence

from .errors import InvalidInputError, UnderdeterminedQueryError

AXES = ("x", "y", "z")


def product_of_largest(sizes: Iterable[int], count: int = 3) -> int:
    """Return the product of the `count` largest cluster sizes."""

    if count < 1:
        raise InvalidInputError("count must be at least 1")
    ordered = sorted(sizes, reverse=True)
    if len(ordered) < count:
        raise UnderdeterminedQueryError(
            f"need at least {count} clusters to multiply, only {len(ordered)} remain"
        )
    return prod(ordered[:count])


def combine_endpoints(first: Sequence[int], second: Sequence[int], axis: str = "x") -> int:
    """Multiply the `axis` coordinate of two points."""

    try:
        position = AXES.index(axis)
    except ValueError:
        raise InvalidInputError(f"unknown axis '{axis}'. Available: {list(AXES)}") from None
    return first[position] * second[position]


__all__ = ["AXES", "product_of_largest", "combine_endpoints"]
