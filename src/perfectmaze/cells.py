"""Cell model shared by the generator and the full-grid helpers."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class CellType(IntEnum):
    WALL = 0
    PASSAGE = 1


class Cell(NamedTuple):
    row: int
    column: int
    type: CellType = CellType.PASSAGE


__all__ = ["Cell", "CellType"]
