"""Fixed point storage and squared-distance helpers."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import InvalidInputError

Point = Tuple[int, int, int]

# Above this magnitude a squared distance summed over three axes may not fit in int64.
_SAFE_MAGNITUDE = 2**29


class CoordinateStore:
    """Immutable list of integer 3D points addressed by input position."""

    def __init__(self, points: Iterable[Sequence[int]]) -> None:
        records = [_as_point(position, record) for position, record in enumerate(points)]
        if not records:
            raise InvalidInputError("at least one point is required")

        largest = max(abs(value) for record in records for value in record)
        dtype = np.int64 if largest < _SAFE_MAGNITUDE else object
        self._coords = np.array(records, dtype=dtype).reshape(len(records), 3)
        self._coords.setflags(write=False)
        self._points = tuple(records)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def array(self) -> np.ndarray:
        return self._coords

    def point(self, index: int) -> Point:
        self._check_index(index)
        return self._points[index]

    def distance_squared(self, first: int, second: int) -> int:
        """Return the exact squared Euclidean distance between two stored points."""

        a = self.point(first)
        b = self.point(second)
        return sum((left - right) ** 2 for left, right in zip(a, b))

    def pairwise_distance_squared(self) -> np.ndarray:
        """Return squared distances for every pair `i < j`, in lexicographic pair order."""

        rows, cols = np.triu_indices(len(self), k=1)
        diff = self._coords[rows] - self._coords[cols]
        return (diff * diff).sum(axis=1)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise InvalidInputError(f"point index {index} out of range for {len(self._points)} points")


def _as_point(position: int, record: Sequence[int]) -> Point:
    values = tuple(record)
    if len(values) != 3:
        raise InvalidInputError(f"point {position} must have exactly 3 coordinates, got {len(values)}")
    for value in values:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise InvalidInputError(f"point {position} has a non-integer coordinate: {value!r}")
    return int(values[0]), int(values[1]), int(values[2])


__all__ = ["CoordinateStore", "Point"]
