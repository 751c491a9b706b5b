from __future__ import annotations

import os
from typing import NamedTuple, Union

import numpy as np
from joblib import Parallel, delayed

from .cells import Cell, CellType
from .union_find import DisjointSet

N_CPU = max(1, os.cpu_count() or 1)

RandomLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


class Edge(NamedTuple):
    """Two adjacent cells of the reduced grid, as ``row * width + column`` indices."""

    first_cell: int
    second_cell: int


class SpanningTreeGenerator:
    """Random spanning tree over the passage cells of a ``height x width`` maze.

    A full maze alternates wall and passage coordinates: passage ``(r, c)`` of
    the reduced grid sits at ``(2r + 1, 2c + 1)`` of the full grid, and the wall
    between two neighbouring passages sits halfway between them. Every call to
    :meth:`generate` draws a fresh edge order, so one instance can produce any
    number of independent mazes.
    """

    def __init__(self, height: int, width: int, *, verbose: bool = False) -> None:
        self._height = max((int(height) - 1) // 2, 0)
        self._width = max((int(width) - 1) // 2, 0)
        self.verbose = verbose

    @property
    def reduced_height(self) -> int:
        return self._height

    @property
    def reduced_width(self) -> int:
        return self._width

    @property
    def full_height(self) -> int:
        return 2 * self._height + 1

    @property
    def full_width(self) -> int:
        return 2 * self._width + 1

    @property
    def node_count(self) -> int:
        return self._height * self._width

    def __repr__(self) -> str:
        return f"SpanningTreeGenerator(reduced_height={self._height}, reduced_width={self._width})"

    def to_index(self, row: int, column: int) -> int:
        return row * self._width + column

    def from_index(self, index: int) -> tuple[int, int]:
        return index // self._width, index % self._width

    def candidate_edges(self) -> np.ndarray:
        """All grid-graph edges, each once, as an ``(E, 2)`` array.

        Order: the leftward edges of the first row, the upward edges of the
        first column, then for every interior cell (row-major) its leftward
        edge followed by its upward edge.
        """
        h, w = self._height, self._width
        if h == 0 or w == 0:
            return np.empty((0, 2), dtype=np.int64)
        top = np.arange(1, w, dtype=np.int64)
        first_row = np.column_stack((top, top - 1))
        left = np.arange(1, h, dtype=np.int64) * w
        first_column = np.column_stack((left, left - w))
        inner = (np.arange(1, h, dtype=np.int64)[:, None] * w + np.arange(1, w, dtype=np.int64)[None, :]).ravel()
        interior = np.empty((2 * inner.size, 2), dtype=np.int64)
        interior[0::2, 0] = inner
        interior[0::2, 1] = inner - 1
        interior[1::2, 0] = inner
        interior[1::2, 1] = inner - w
        return np.concatenate((first_row, first_column, interior), axis=0)

    def edges(self) -> list[Edge]:
        return [Edge(a, b) for a, b in self.candidate_edges().tolist()]

    def spanning_tree(self, rng: RandomLike = None) -> list[Edge]:
        """Kruskal over a random permutation of the candidate edges.

        Edges are returned in the order they were accepted.
        """
        rng = np.random.default_rng(rng)
        candidates = self.candidate_edges()
        shuffled = candidates[rng.permutation(candidates.shape[0])]
        if self.verbose:
            print(f"Candidate edges: {shuffled.shape[0]} over {self.node_count} cells")
        disjoint_set = DisjointSet(self.node_count)
        tree = [Edge(a, b) for a, b in shuffled.tolist() if disjoint_set.union(a, b)]
        expected = max(0, self.node_count - 1)
        if len(tree) != expected:
            raise RuntimeError(f"Spanning tree has {len(tree)} edges, expected {expected}")
        if self.verbose:
            print(f"Accepted edges: {len(tree)} (rejected {shuffled.shape[0] - len(tree)})")
        return tree

    def generate(self, rng: RandomLike = None) -> list[Cell]:
        """Connector cells to open in the full grid, in acceptance order."""
        tree = self.spanning_tree(rng)
        if not tree:
            return []
        ends = np.asarray(tree, dtype=np.int64)
        rows = ends // self._width
        columns = ends % self._width
        passage_rows = rows.sum(axis=1) + 1
        passage_columns = columns.sum(axis=1) + 1
        return [
            Cell(r, c, CellType.PASSAGE)
            for r, c in zip(passage_rows.tolist(), passage_columns.tolist())
        ]


def generate_many(
    height: int,
    width: int,
    count: int,
    *,
    seed: int | np.random.SeedSequence | None = None,
    n_jobs: int = N_CPU,
    verbose: bool = False,
) -> list[list[Cell]]:
    """Generate ``count`` independent mazes of the same size in parallel.

    Each maze draws from its own child of ``SeedSequence(seed)``, so a fixed
    seed yields the same batch whatever ``n_jobs`` is.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if count == 0:
        return []
    generator = SpanningTreeGenerator(height, width)
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    children = root.spawn(count)
    if verbose:
        print(f"Generating {count} mazes of {generator.full_height}x{generator.full_width} on {n_jobs} jobs")
    mazes = Parallel(n_jobs=n_jobs, prefer="processes")(
        delayed(generator.generate)(child) for child in children
    )
    return list(mazes)


__all__ = ["Edge", "SpanningTreeGenerator", "generate_many", "N_CPU"]
