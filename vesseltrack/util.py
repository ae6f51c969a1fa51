"""Geometry helpers relating tiles, lines and the points of a trajectory."""

from __future__ import annotations

import math
from typing import Any

from shapely.geometry import LineString, Point, Polygon

from vesseltrack.geodesic import geodesic_distance
from vesseltrack.xyzcell import Cell


def _tile_lon(x: float, z: int) -> float:
    return x / 2.0**z * 360.0 - 180.0


def _tile_lat(y: float, z: int) -> float:
    return math.degrees(math.atan(math.sinh(math.pi - y / 2.0**z * 2.0 * math.pi)))


def grid_centroid_to_lon_lat(cell: Cell, zoom: int) -> Point:
    """Longitude/latitude of the centre of ``cell``; the cell's own zoom is used."""
    z = cell.z
    return Point(_tile_lon(0.5 + cell.coord.x, z), _tile_lat(0.5 + cell.coord.y, z))


def cell_to_polygon(cell: Cell) -> Polygon:
    """The tile outline as a counter-clockwise lon/lat polygon."""
    z = cell.z
    lon = _tile_lon(cell.coord.x, z)
    lon_1 = _tile_lon(1.0 + cell.coord.x, z)
    lat = _tile_lat(cell.coord.y, z)
    lat_1 = _tile_lat(1.0 + cell.coord.y, z)
    return Polygon([(lon, lat), (lon, lat_1), (lon_1, lat_1), (lon_1, lat), (lon, lat)])


def _endpoints(line: Any) -> tuple[tuple[float, float], tuple[float, float]]:
    coords = list(line.coords)
    return tuple(coords[0]), tuple(coords[-1])


def _segment(line: Any) -> LineString:
    return LineString(_endpoints(line))


def _edges(polygon: Polygon):
    ring = list(polygon.exterior.coords)
    return (LineString([a, b]) for a, b in zip(ring, ring[1:]))


def _intersections(line: Any, polygon: Polygon):
    """Yield each edge intersection as ('point', p) or ('collinear', (start, end))."""
    segment = _segment(line)
    for edge in _edges(polygon):
        hit = segment.intersection(edge)
        if hit.is_empty:
            continue
        if hit.geom_type == "Point":
            yield "point", (hit.x, hit.y)
        elif hit.geom_type == "LineString":
            coords = list(hit.coords)
            yield "collinear", (tuple(coords[0]), tuple(coords[-1]))
        else:
            for part in getattr(hit, "geoms", ()):
                if part.geom_type == "Point":
                    yield "point", (part.x, part.y)


def line_no_end_point_in_polygon(line: Any, polygon: Polygon) -> float:
    """Geodesic length of ``line`` inside ``polygon`` when neither endpoint lies in it."""
    points = []
    for kind, value in _intersections(line, polygon):
        points.extend(value if kind == "collinear" else [value])
        if len(points) >= 2:
            break
    if len(points) < 2:
        raise ValueError("line must cross the polygon boundary twice")
    return geodesic_distance(points[0], points[1])


def line_one_point_in_polygon(line: Any, polygon: Polygon) -> float:
    """Geodesic length of ``line`` inside ``polygon`` when exactly one endpoint lies in it."""
    covered = [p for p in _endpoints(line) if polygon.covers(Point(p))]
    if len(covered) != 1:
        raise ValueError("exactly one endpoint must be covered by the polygon")
    inside = covered[0]
    for kind, value in _intersections(line, polygon):
        if kind == "point":
            crossing = value
        else:
            start, end = value
            crossing = start if start != inside else end
        return geodesic_distance(inside, crossing)
    raise ValueError("line does not intersect the polygon boundary")


def line_contained_in_polygon(line: Any, polygon: Polygon) -> float:
    """Geodesic length of ``line``, which must be covered by ``polygon``."""
    if not polygon.covers(LineString(list(line.coords))):
        raise ValueError("line should be covered by polygon")
    coords = list(line.coords)
    return sum(geodesic_distance(a, b) for a, b in zip(coords, coords[1:]))


def ground_truth_to_cell_centroid_geodesic(point: Any, cell: Cell) -> float:
    """Geodesic distance from ``point`` to the centre of ``cell``."""
    return geodesic_distance(grid_centroid_to_lon_lat(cell, cell.z), point)