"""Tile coordinates on a slippy-map grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, order=True)
class GridPoint:
    """Integer column and row of a tile."""

    x: int
    y: int


@dataclass(frozen=True, order=True)
class Cell:
    """A tile: its grid coordinate and zoom level."""

    coord: GridPoint
    z: int

    @classmethod
    def from_rendered(cls, rendered: Any) -> "Cell":
        """Build a cell from any rendered point exposing ``point`` (with ``x``/``y``) and ``z``."""
        return cls(GridPoint(int(rendered.point.x), int(rendered.point.y)), int(rendered.z))