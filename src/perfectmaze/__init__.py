"""Random perfect maze generation via a randomized Kruskal spanning tree."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Cell",
    "CellType",
    "DisjointSet",
    "Edge",
    "SpanningTreeGenerator",
    "build_maze",
    "carve_grid",
    "generate_many",
    "is_perfect",
]

_LOCATIONS = {
    "Cell": "perfectmaze.cells",
    "CellType": "perfectmaze.cells",
    "DisjointSet": "perfectmaze.union_find",
    "Edge": "perfectmaze.core",
    "SpanningTreeGenerator": "perfectmaze.core",
    "generate_many": "perfectmaze.core",
    "build_maze": "perfectmaze.grid",
    "carve_grid": "perfectmaze.grid",
    "is_perfect": "perfectmaze.grid",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _LOCATIONS:
        module = import_module(_LOCATIONS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'perfectmaze' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
