"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

import numpy as np


class DisjointSet:
    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent = np.arange(size, dtype=np.int64)
        self.rank = np.zeros(size, dtype=np.int64)
        self._size = int(size)

    def __len__(self) -> int:
        return int(self.parent.size)

    @property
    def size(self) -> int:
        """Number of disjoint subsets still alive."""
        return self._size

    def _check(self, x: int) -> int:
        x = int(x)
        if not 0 <= x < self.parent.size:
            raise IndexError(f"element {x} out of range for {self.parent.size} elements")
        return x

    def find(self, x: int) -> int:
        x = self._check(x)
        parent = self.parent
        root = x
        while parent[root] != root:
            root = int(parent[root])
        while parent[x] != root:
            nxt = int(parent[x])
            parent[x] = root
            x = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        rank = self.rank
        parent = self.parent
        if rank[ra] < rank[rb]:
            parent[ra] = rb
        else:
            parent[rb] = ra
            if rank[ra] == rank[rb]:
                rank[ra] += 1
        self._size -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def roots(self) -> np.ndarray:
        return np.fromiter((self.find(i) for i in range(self.parent.size)), count=self.parent.size, dtype=np.int64)


__all__ = ["DisjointSet"]
