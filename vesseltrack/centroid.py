"""Scoring of rendered cells by how well a segment passes through their centre."""

from __future__ import annotations

from typing import Any, Iterable

from shapely.geometry import LineString, Point, Polygon

from vesseltrack.geodesic import geodesic_distance
from vesseltrack.measure import CellWithError, length_of_line
from vesseltrack.util import cell_to_polygon
from vesseltrack.xyzcell import Cell


def _as_lon_lat(point: Any) -> tuple[float, float]:
    if hasattr(point, "x") and hasattr(point, "y"):
        return float(point.x), float(point.y)
    return float(point[0]), float(point[1])


def _geodesic_perimeter(polygon: Polygon) -> float:
    ring = list(polygon.exterior.coords)
    return sum(geodesic_distance(a, b) for a, b in zip(ring, ring[1:]))


def _closest_point(
    start: tuple[float, float], end: tuple[float, float], target: Point
) -> tuple[float, float]:
    """Planar closest point on the segment to ``target``; the start for a degenerate segment."""
    if start == end:
        return start
    line = LineString([start, end])
    nearest = line.interpolate(line.project(target))
    return nearest.x, nearest.y


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def line_error_relative_to_perfect_and_centroid(
    segment: tuple[Any, Any], cells: Iterable[Cell]
) -> list[CellWithError]:
    """Score in [0, 1] for each cell combining closeness to its centroid and length inside it."""
    start, end = (_as_lon_lat(p) for p in segment)
    total_length = geodesic_distance(start, end)
    scored = []
    for cell in cells:
        polygon = cell_to_polygon(cell)
        side_length = _geodesic_perimeter(polygon) / 4.0
        centroid = polygon.centroid
        closest = _closest_point(start, end, centroid)
        centroid_to_line = geodesic_distance((centroid.x, centroid.y), closest)
        length_inside = length_of_line((start, end), cell)[1]
        centroid_ratio = max(1.0 - centroid_to_line / (side_length / 2.0), 0.0)
        length_ratio = _clamp(length_inside, 0.0, side_length) / side_length
        if length_inside == total_length:
            # The whole segment lies in this cell: only the centroid distance counts.
            scored.append((cell, _clamp(centroid_ratio, 0.0, 1.0)))
        else:
            scored.append((cell, _clamp(centroid_ratio * length_ratio, 0.0, 1.0)))
    return scored