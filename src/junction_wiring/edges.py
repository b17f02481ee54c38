"""Edge generation and ordering over a coordinate store."""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable, List, NamedTuple

import numpy as np

from .coordinates import CoordinateStore


class Edge(NamedTuple):
    """Candidate cable between points `u < v`; `weight` is a squared distance used only for ordering."""

    u: int
    v: int
    weight: int


def generate_edges(store: CoordinateStore) -> List[Edge]:
    """Return every unordered pair of points with its squared distance, ordered by `(u, v)`."""

    rows, cols = np.triu_indices(len(store), k=1)
    weights = store.pairwise_distance_squared()
    return [Edge(u, v, int(w)) for u, v, w in zip(rows.tolist(), cols.tolist(), weights.tolist())]


def sort_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Return `edges` ordered by ascending weight; ties keep their incoming order."""

    return sorted(edges, key=attrgetter("weight"))


__all__ = ["Edge", "generate_edges", "sort_edges"]
