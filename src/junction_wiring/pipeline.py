"""Core pipeline: wire junction boxes together along the shortest cables first."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from tqdm import tqdm

from .coordinates import CoordinateStore, Point
from .edges import Edge, generate_edges, sort_edges
from .errors import ConnectivityInvariantError, InvalidInputError, UnderdeterminedQueryError
from .structures import DisjointSet
from .summary import combine_endpoints, product_of_largest


@dataclass
class CircuitBuilderStats:
    """Summary metrics for one query."""

    total_points: int
    edge_count: int
    edges_processed: int
    successful_unions: int
    cluster_count: int
    runtime_seconds: float


@dataclass
class BoundedResult:
    """Outcome of wiring a fixed number of the shortest edges."""

    product: int
    sizes: List[int]
    edges_processed: int
    successful_unions: int
    forest: DisjointSet
    stats: CircuitBuilderStats


@dataclass
class ConnectedResult:
    """Outcome of wiring until every point shares one circuit."""

    final_edge: Edge | None
    endpoints: Tuple[Point, Point] | None
    axis: str
    stats: CircuitBuilderStats

    @property
    def value(self) -> int:
        return self.combine(self.axis)

    def combine(self, axis: str = "x") -> int:
        if self.endpoints is None:
            raise UnderdeterminedQueryError("a single point has no connecting edge to combine")
        first, second = self.endpoints
        return combine_endpoints(first, second, axis)


@dataclass
class CircuitBuilderConfig:
    """Configuration parameters for :class:`CircuitBuilder`."""

    edge_limit: int = 1000
    largest_count: int = 3
    combine_axis: str = "x"
    use_tqdm: bool | None = None
    verbose: bool = False


class CircuitBuilder:
    """Build a minimum spanning forest over a fixed point set and answer the two wiring queries.

    The sorted edge stream is computed once on first use and shared by both
    queries; each query mutates its own freshly created :class:`DisjointSet`.
    """

    def __init__(
        self,
        points: CoordinateStore | Iterable[Sequence[int]],
        config: CircuitBuilderConfig | None = None,
    ) -> None:
        self.config = config or CircuitBuilderConfig()
        self.store = points if isinstance(points, CoordinateStore) else CoordinateStore(points)
        self._edges: List[Edge] | None = None

    @property
    def edges(self) -> List[Edge]:
        """All point pairs, sorted by ascending squared distance."""

        if self._edges is None:
            verbose = self.config.verbose
            t0 = time.time()
            if verbose:
                print(f"1. Generating candidate cables for {len(self.store)} junction boxes...")
            generated = generate_edges(self.store)
            if verbose:
                print(f"   Generated {len(generated)} edges. Done in {time.time() - t0:.2f}s")

            t0 = time.time()
            if verbose:
                print("2. Sorting edges by length...")
            self._edges = sort_edges(generated)
            if verbose:
                print(f"   Done in {time.time() - t0:.2f}s")
        return self._edges

    def connect_bounded(self, edge_limit: int | None = None) -> BoundedResult:
        """Wire the `edge_limit` shortest edges and multiply the largest circuit sizes."""

        limit = self.config.edge_limit if edge_limit is None else edge_limit
        if limit < 0:
            raise InvalidInputError(f"edge limit must be non-negative, got {limit}")
        count = self.config.largest_count
        if count < 1:
            raise InvalidInputError(f"largest count must be at least 1, got {count}")
        total = len(self.store)
        if total < count:
            raise UnderdeterminedQueryError(
                f"need at least {count} points to report {count} circuits, got {total}"
            )

        start = time.time()
        edges = self.edges
        batch = edges[:limit]
        if self.config.verbose:
            print(f"3. Wiring the {len(batch)} shortest edges...")

        forest = DisjointSet(total)
        successful = 0
        for edge in self._progress(batch, "   Wiring"):
            if forest.union(edge.u, edge.v):
                successful += 1

        sizes = sorted(forest.root_sizes().values(), reverse=True)
        product = product_of_largest(sizes, count)
        stats = CircuitBuilderStats(
            total_points=total,
            edge_count=len(edges),
            edges_processed=len(batch),
            successful_unions=successful,
            cluster_count=forest.cluster_count,
            runtime_seconds=time.time() - start,
        )
        if self.config.verbose:
            print(f"   {forest.cluster_count} circuits remain; largest sizes {sizes[:count]}")
        return BoundedResult(
            product=product,
            sizes=sizes,
            edges_processed=len(batch),
            successful_unions=successful,
            forest=forest,
            stats=stats,
        )

    def connect_all(self) -> ConnectedResult:
        """Wire edges in order until one circuit remains and report the edge that closed it."""

        start = time.time()
        total = len(self.store)
        edges = self.edges
        if self.config.verbose:
            print("3. Wiring until every junction box shares one circuit...")

        forest = DisjointSet(total)
        remaining = total
        processed = 0
        final_edge: Edge | None = None
        if remaining > 1:
            for edge in self._progress(edges, "   Wiring"):
                processed += 1
                if not forest.union(edge.u, edge.v):
                    continue
                remaining -= 1
                if remaining == 1:
                    final_edge = edge
                    break
            if final_edge is None:
                raise ConnectivityInvariantError(
                    f"{remaining} circuits remain after all {len(edges)} edges were wired"
                )

        endpoints = None
        if final_edge is not None:
            endpoints = (self.store.point(final_edge.u), self.store.point(final_edge.v))
        stats = CircuitBuilderStats(
            total_points=total,
            edge_count=len(edges),
            edges_processed=processed,
            successful_unions=total - remaining,
            cluster_count=forest.cluster_count,
            runtime_seconds=time.time() - start,
        )
        if self.config.verbose:
            print(f"   Final edge {final_edge} after {processed} edges. Done in {stats.runtime_seconds:.2f}s")
        return ConnectedResult(
            final_edge=final_edge,
            endpoints=endpoints,
            axis=self.config.combine_axis,
            stats=stats,
        )

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm
        return self.config.verbose

    def _progress(self, edges: List[Edge], desc: str) -> Iterable[Edge]:
        if edges and self._use_tqdm:
            return tqdm(edges, desc=desc, unit="edge")
        return edges


__all__ = [
    "CircuitBuilder",
    "CircuitBuilderConfig",
    "CircuitBuilderStats",
    "BoundedResult",
    "ConnectedResult",
]
