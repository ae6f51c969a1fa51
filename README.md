# vesseltrack

Tools for working with vessel (AIS) trajectories on web-map tile grids.

## What is in the package

- **Weights and bounds** (`vesseltrack.cell`): `judweight_vessel()` and
  `judweight_depth()` return weight vectors that sum to 1. Each comes from a
  fixed pairwise-comparison matrix by the power method, and the result is
  cached. `relative_to_bounds(bounds, num)` gives the position of `num`
  within a `MinmaxBounds(min, max)`, with 0 at the minimum and 1 at the
  maximum.
- **Split thresholds** (`vesseltrack.lines`): `SeparateConf`, a frozen
  dataclass that holds a `distance` in metres (default 1000.0) and a `time`
  as a `timedelta` (default 60 seconds).
- **Draught confidence** (`vesseltrack.confidence`):
  `deviation_from_confidence(draught, (start, end))` is the distance from
  the draught to the inclusive interval, and 0 inside it.
  `score_deviation` returns the square of that distance.
- **Tile cells** (`vesseltrack.xyzcell`): `GridPoint(x, y)` and
  `Cell(coord, z)`. Both are frozen, hashable and ordered.
  `Cell.from_rendered` builds a cell from any object that has
  `point.x`, `point.y` and `z`.
- **Geodesic distance** (`vesseltrack.geodesic`): `geodesic_distance` gives
  the distance in metres on the WGS84 ellipsoid between two lon/lat points.
  A point may be an `(x, y)` pair or an object with `x` and `y`.
- **Cell geometry** (`vesseltrack.util`):
  - `grid_centroid_to_lon_lat` returns the centre of a cell.
  - `cell_to_polygon` returns the cell outline as a shapely `Polygon`.
  - `ground_truth_to_cell_centroid_geodesic` gives the distance from a point
    to the centre of a cell.
  - Three functions measure the part of a line that lies inside a polygon,
    one for each case:
    - `line_contained_in_polygon`: the whole line is inside.
    - `line_one_point_in_polygon`: exactly one endpoint is inside.
    - `line_no_end_point_in_polygon`: the line crosses the boundary twice.

    Each raises `ValueError` when the line does not fit its case.
- **Length in cells** (`vesseltrack.measure`):
  - `length_of_line(segment, cell)` returns `(cell, metres)`, the geodesic
    length of the segment inside the cell.
  - `length_of_line_in_cells(segment, cells)` does the same for every cell
    and leaves out the cells with length 0.
- **Centroid score** (`vesseltrack.centroid`):
  `line_error_relative_to_perfect_and_centroid(segment, cells)` gives each
  cell a score in `[0, 1]`. The score combines how close the segment passes
  to the cell centroid with how much of a cell side's length the segment
  covers. When the whole segment lies in one cell, only the centroid term
  counts.
- **Reliability and trajectory splitting** (`vesseltrack.reliability`):
  - `ddm_reliability(sources, years)` scores depth samples by source rank
    (0–7) and survey year (2000–2024). A year of `None` counts as 0.
  - `within_distance` compares the distance between two
    `(lon, lat, time)` points with a threshold.
  - `within_time` does the same for the time between them.
  - `trajectory_split(from_points, to_points)` returns `True` for each pair
    that is less than 1000 m and less than 60 s apart.
- **Data tables** (`vesseltrack.tables`): column tables, each with
  `search_by_key`:
  - `NavStatus`, `Draught`, `Cog`, `Rot`, `Sog`, `Dimensions`,
    `GPSPosition`, `StopObject` and `Trajectories`.
  - `Ships` holds one of each table.
  - `Draught.search_range_by_time` returns the row indices whose time
    intervals overlap a given range.
  - `nav_status_converter` maps a status name such as `"at anchor"` to a
    `NavStatusValue`. It raises `ValueError` for an unknown name.
- **Errors** (`vesseltrack.errors`): the base class is `DataError`. Below it
  are `DatabaseError`, `TableError` (with `MissingKeyError`,
  `DuplicateKeyError` and `LoaderError`) and `CsvError`. A lookup that finds
  no row raises `MissingKeyError`.
- **CSV loading** (`vesseltrack.csvloader`): `read_data(path)` reads an AIS
  CSV export into a list of `CsvRecord` objects. Empty fields become `None`.
  `time_converter` parses `dd/mm/YYYY HH:MM:SS` timestamps. Both raise
  `CsvError` on failure.

## What the package does not do

- It has no command-line program.
- It does not connect to a database. The tables in `vesseltrack.tables` are
  filled by the caller.
- It does not render trajectories into tiles. The error measures take the
  cells to score as input.

## Installation

```
pip install vesseltrack
```

## Example

```python
from vesseltrack.cell import MinmaxBounds, judweight_depth, relative_to_bounds

source_weight, age_weight = judweight_depth()
source_bounds = MinmaxBounds(min=0.0, max=7.0)
age_bounds = MinmaxBounds(min=2000.0, max=2024.0)

score = (
    (1.0 - relative_to_bounds(source_bounds, 0.0)) * source_weight
    + relative_to_bounds(age_bounds, 2024.0) * age_weight
)
# the best source with the newest survey scores 1.0
```

## Running the tests

```
pip install "vesseltrack[test]"
pytest
```