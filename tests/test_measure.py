import pytest

from vesseltrack.geodesic import geodesic_distance
from vesseltrack.measure import length_of_line, length_of_line_in_cells
from vesseltrack.util import cell_to_polygon
from vesseltrack.xyzcell import Cell, GridPoint

CELL = Cell(GridPoint(533, 315), 10)
NEIGHBOUR = Cell(GridPoint(534, 315), 10)


def _bounds(cell):
    return cell_to_polygon(cell).bounds


def _inside(cell, fx, fy):
    minx, miny, maxx, maxy = _bounds(cell)
    return (minx + (maxx - minx) * fx, miny + (maxy - miny) * fy)


def test_segment_entirely_inside_cell():
    a = _inside(CELL, 0.2, 0.3)
    b = _inside(CELL, 0.8, 0.7)
    cell, length = length_of_line((a, b), CELL)
    assert cell == CELL
    assert length == pytest.approx(geodesic_distance(a, b))
    assert length > 0.0


def test_segment_outside_cell_has_zero_length():
    minx, miny, maxx, maxy = _bounds(CELL)
    a = (maxx + 1.0, miny)
    b = (maxx + 2.0, maxy)
    assert length_of_line((a, b), CELL) == (CELL, 0.0)


def test_segment_with_one_endpoint_inside():
    minx, miny, maxx, maxy = _bounds(CELL)
    mid_y = (miny + maxy) / 2.0
    inside = ((minx + maxx) / 2.0, mid_y)
    outside = (maxx + (maxx - minx), mid_y)
    _, length = length_of_line((inside, outside), CELL)
    assert length == pytest.approx(geodesic_distance(inside, (maxx, mid_y)), rel=1e-6)
    assert 0.0 < length < geodesic_distance(inside, outside)


def test_segment_direction_does_not_matter_for_one_endpoint():
    minx, miny, maxx, maxy = _bounds(CELL)
    mid_y = (miny + maxy) / 2.0
    inside = ((minx + maxx) / 2.0, mid_y)
    outside = (maxx + (maxx - minx), mid_y)
    _, forward = length_of_line((inside, outside), CELL)
    _, backward = length_of_line((outside, inside), CELL)
    assert forward == pytest.approx(backward, rel=1e-9)


def test_segment_passing_through_without_endpoints_scores_zero():
    minx, miny, maxx, maxy = _bounds(CELL)
    mid_y = (miny + maxy) / 2.0
    west = (minx - (maxx - minx), mid_y)
    east = (maxx + (maxx - minx), mid_y)
    assert length_of_line((west, east), CELL)[1] == 0.0


def test_points_with_xy_attributes_are_accepted():
    from shapely.geometry import Point

    a = _inside(CELL, 0.25, 0.25)
    b = _inside(CELL, 0.75, 0.75)
    _, length = length_of_line((Point(a), Point(b)), CELL)
    assert length == pytest.approx(geodesic_distance(a, b))


def test_length_in_cells_drops_untouched_cells():
    a = _inside(CELL, 0.2, 0.5)
    b = _inside(CELL, 0.8, 0.5)
    far = Cell(GridPoint(100, 100), 10)
    result = length_of_line_in_cells((a, b), [CELL, far])
    assert [cell for cell, _ in result] == [CELL]
    assert all(length > 0.0 for _, length in result)


def test_length_in_cells_splits_across_neighbours():
    a = _inside(CELL, 0.5, 0.5)
    b = _inside(NEIGHBOUR, 0.5, 0.5)
    result = dict(length_of_line_in_cells((a, b), [CELL, NEIGHBOUR]))
    assert set(result) == {CELL, NEIGHBOUR}
    assert sum(result.values()) == pytest.approx(geodesic_distance(a, b), rel=1e-6)


def test_length_in_cells_empty_input():
    a = _inside(CELL, 0.5, 0.5)
    b = _inside(CELL, 0.6, 0.6)
    assert length_of_line_in_cells((a, b), []) == []