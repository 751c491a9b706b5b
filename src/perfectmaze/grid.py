from __future__ import annotations

from typing import Iterable

import numpy as np

from .cells import Cell, CellType
from .core import RandomLike, SpanningTreeGenerator
from .union_find import DisjointSet


def carve_grid(height: int, width: int, passages: Iterable[Cell]) -> np.ndarray:
    """Full ``height x width`` grid of ``CellType`` values.

    Starts from walls, opens every reduced cell at ``(2r + 1, 2c + 1)`` and
    then every connector in ``passages``.
    """
    if height < 0 or width < 0:
        raise ValueError("height and width must be non-negative")
    grid = np.full((height, width), CellType.WALL, dtype=np.int8)
    reduced_h = max((height - 1) // 2, 0)
    reduced_w = max((width - 1) // 2, 0)
    grid[1 : 2 * reduced_h : 2, 1 : 2 * reduced_w : 2] = CellType.PASSAGE
    for cell in passages:
        r = int(cell.row)
        c = int(cell.column)
        if not (0 <= r < height and 0 <= c < width):
            raise IndexError(f"cell ({r}, {c}) outside a {height}x{width} grid")
        grid[r, c] = cell.type
    return grid


def build_maze(height: int, width: int, rng: RandomLike = None, *, verbose: bool = False) -> np.ndarray:
    generator = SpanningTreeGenerator(height, width, verbose=verbose)
    return carve_grid(height, width, generator.generate(rng))


def is_perfect(grid: np.ndarray) -> bool:
    """True when the open cells form a single tree under 4-adjacency."""
    grid = np.asarray(grid)
    if grid.ndim != 2:
        raise ValueError("grid must be a 2D array")
    is_open = grid == CellType.PASSAGE
    n_open = int(is_open.sum())
    if n_open == 0:
        return False
    ids = np.full(grid.shape, -1, dtype=np.int64)
    ids[is_open] = np.arange(n_open, dtype=np.int64)
    horizontal = is_open[:, 1:] & is_open[:, :-1]
    vertical = is_open[1:, :] & is_open[:-1, :]
    u = np.concatenate((ids[:, 1:][horizontal], ids[1:, :][vertical]))
    v = np.concatenate((ids[:, :-1][horizontal], ids[:-1, :][vertical]))
    if u.size != n_open - 1:
        return False
    disjoint_set = DisjointSet(n_open)
    for a, b in zip(u.tolist(), v.tolist()):
        if not disjoint_set.union(a, b):
            return False
    return disjoint_set.size == 1


__all__ = ["build_maze", "carve_grid", "is_perfect"]
