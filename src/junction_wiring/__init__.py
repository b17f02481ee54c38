"""Junction wiring library initialization."""

from .coordinates import CoordinateStore
from .edges import Edge, generate_edges, sort_edges
from .errors import (
    ConnectivityInvariantError,
    InvalidInputError,
    JunctionWiringError,
    UnderdeterminedQueryError,
)
from .pipeline import BoundedResult, CircuitBuilder, CircuitBuilderConfig, CircuitBuilderStats, ConnectedResult
from .runner import load_points, solve_file
from .structures import DisjointSet
from .summary import combine_endpoints, product_of_largest

__all__ = [
    "CoordinateStore",
    "Edge",
    "generate_edges",
    "sort_edges",
    "DisjointSet",
    "CircuitBuilder",
    "CircuitBuilderConfig",
    "CircuitBuilderStats",
    "BoundedResult",
    "ConnectedResult",
    "JunctionWiringError",
    "InvalidInputError",
    "UnderdeterminedQueryError",
    "ConnectivityInvariantError",
    "combine_endpoints",
    "product_of_largest",
    "load_points",
    "solve_file",
]
