"""Length of a trajectory segment that falls inside grid cells."""

from __future__ import annotations

from typing import Any, Iterable

from shapely.geometry import LineString, Point

from vesseltrack.util import (
    cell_to_polygon,
    line_contained_in_polygon,
    line_no_end_point_in_polygon,
    line_one_point_in_polygon,
)
from vesseltrack.xyzcell import Cell

CellWithError = tuple[Cell, float]


def _as_lon_lat(point: Any) -> tuple[float, float]:
    if hasattr(point, "x") and hasattr(point, "y"):
        return float(point.x), float(point.y)
    lon, lat = point[0], point[1]
    return float(lon), float(lat)


def length_of_line(segment: tuple[Any, Any], cell: Cell) -> CellWithError:
    """Geodesic length (metres) of the part of ``segment`` that lies inside ``cell``."""
    first, second = (_as_lon_lat(p) for p in segment)
    start, end = Point(first), Point(second)
    line = LineString([first, second])
    polygon = cell_to_polygon(cell)

    start_covered = polygon.covers(start)
    end_covered = polygon.covers(end)

    if start_covered and end_covered:
        # Both ends inside a convex cell: the whole segment is inside.
        length = line_contained_in_polygon(line, polygon)
    elif polygon.disjoint(start) and polygon.disjoint(end):
        length = 0.0
    elif start_covered or end_covered:
        length = line_one_point_in_polygon(line, polygon)
    else:
        length = line_no_end_point_in_polygon(line, polygon)
    return cell, length


def length_of_line_in_cells(
    segment: tuple[Any, Any], cells: Iterable[Cell]
) -> list[CellWithError]:
    """Lengths of ``segment`` within each cell, leaving out cells it does not enter."""
    measured = (length_of_line(segment, cell) for cell in cells)
    return [(cell, length) for cell, length in measured if length != 0.0]