"""Basic data structures."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List

from .errors import InvalidInputError


@dataclass
class DisjointSet:
    """Union-find structure with path compression and union by size."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.sizes = [1] * self.size
        self.cluster_count = self.size

    def __len__(self) -> int:
        return self.size

    def find(self, index: int) -> int:
        self._check_index(index)
        root = index
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[index] != root:
            self.parent[index], index = root, self.parent[index]
        return root

    def union(self, left: int, right: int) -> bool:
        """Merge the clusters of `left` and `right`; return False if they already match."""

        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        # the second root joins the first unless its cluster is strictly larger
        if self.sizes[root_left] < self.sizes[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.sizes[root_left] += self.sizes[root_right]
        self.cluster_count -= 1
        return True

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def size_of(self, index: int) -> int:
        return self.sizes[self.find(index)]

    def root_sizes(self) -> Dict[int, int]:
        """Return `{root: cluster size}` for every current root."""

        return {index: self.sizes[index] for index in range(self.size) if self.parent[index] == index}

    def clusters(self) -> Dict[int, List[int]]:
        members: Dict[int, List[int]] = defaultdict(list)
        for index in range(self.size):
            members[self.find(index)].append(index)
        return dict(members)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise InvalidInputError(f"point index {index} out of range for {self.size} points")
