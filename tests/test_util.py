import pytest
from shapely.geometry import LineString, Point, box

from vesseltrack.geodesic import geodesic_distance
from vesseltrack.util import (
    cell_to_polygon,
    grid_centroid_to_lon_lat,
    ground_truth_to_cell_centroid_geodesic,
    line_contained_in_polygon,
    line_no_end_point_in_polygon,
    line_one_point_in_polygon,
)
from vesseltrack.xyzcell import Cell, GridPoint

RECT = box(10.0, 10.0, 30.0, 20.0)


def test_line_one_point_in_polygon_corner():
    line = LineString([(10.0, 30.0), (10.0, 20.0)])
    assert line_one_point_in_polygon(line, RECT) == 0.0


def test_line_one_point_in_polygon_crossing():
    line = LineString([(0.0, 15.0), (20.0, 15.0)])
    assert line_one_point_in_polygon(line, RECT) == pytest.approx(
        geodesic_distance((20.0, 15.0), (10.0, 15.0))
    )


def test_line_one_point_rejects_both_inside():
    with pytest.raises(ValueError):
        line_one_point_in_polygon(LineString([(12.0, 15.0), (20.0, 15.0)]), RECT)


def test_line_no_end_point_in_polygon():
    line = LineString([(0.0, 15.0), (40.0, 15.0)])
    assert line_no_end_point_in_polygon(line, RECT) == pytest.approx(
        geodesic_distance((10.0, 15.0), (30.0, 15.0))
    )


def test_line_no_end_point_rejects_miss():
    with pytest.raises(ValueError):
        line_no_end_point_in_polygon(LineString([(0.0, 50.0), (40.0, 50.0)]), RECT)


def test_line_contained_in_polygon():
    line = LineString([(12.0, 12.0), (25.0, 18.0)])
    assert line_contained_in_polygon(line, RECT) == pytest.approx(
        geodesic_distance((12.0, 12.0), (25.0, 18.0))
    )


def test_line_contained_rejects_outside():
    with pytest.raises(ValueError):
        line_contained_in_polygon(LineString([(0.0, 0.0), (25.0, 18.0)]), RECT)


def test_midpoint_in_atleast_1_polygon():
    cells = [
        Cell(GridPoint(533, 315), 10),
        Cell(GridPoint(534, 315), 10),
        Cell(GridPoint(533, 316), 10),
        Cell(GridPoint(534, 316), 10),
    ]
    midpoint = Point(7.734375, 56.75272287205735)
    covered = [cell_to_polygon(c).covers(midpoint) for c in cells]
    assert sum(covered) > 0


@pytest.mark.parametrize("x,z", [(10, 10), (10 * 11 * 2, 21)])
def test_sub_cell_contained(x, z):
    parent = cell_to_polygon(Cell(GridPoint(x, x), z))
    child = cell_to_polygon(Cell(GridPoint(x * 2, x * 2), z + 1))
    assert child.difference(parent).area == 0.0


def test_polygon_is_counter_clockwise():
    assert cell_to_polygon(Cell(GridPoint(533, 315), 10)).exterior.is_ccw


def test_world_cell_bounds():
    minx, miny, maxx, maxy = cell_to_polygon(Cell(GridPoint(0, 0), 0)).bounds
    assert (minx, maxx) == (-180.0, 180.0)
    assert maxy == pytest.approx(85.0511287798, abs=1e-9)
    assert miny == pytest.approx(-85.0511287798, abs=1e-9)


def test_world_cell_centroid():
    centre = grid_centroid_to_lon_lat(Cell(GridPoint(0, 0), 0), 0)
    assert centre.x == pytest.approx(0.0)
    assert centre.y == pytest.approx(0.0, abs=1e-12)


def test_centroid_inside_cell():
    cell = Cell(GridPoint(1234, 5678), 14)
    assert cell_to_polygon(cell).contains(grid_centroid_to_lon_lat(cell, cell.z))


def test_ground_truth_at_centroid_is_zero():
    cell = Cell(GridPoint(533, 315), 10)
    centre = grid_centroid_to_lon_lat(cell, cell.z)
    assert ground_truth_to_cell_centroid_geodesic(centre, cell) == 0.0


def test_ground_truth_distance_matches_direct_distance():
    cell = Cell(GridPoint(533, 315), 10)
    point = (7.5, 56.9)
    centre = grid_centroid_to_lon_lat(cell, cell.z)
    assert ground_truth_to_cell_centroid_geodesic(point, cell) == pytest.approx(
        geodesic_distance(centre, point)
    )