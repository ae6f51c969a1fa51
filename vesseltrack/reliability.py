"""Row-wise scoring of depth-model reliability and trajectory continuity."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from vesseltrack.cell import MinmaxBounds, judweight_depth, relative_to_bounds
from vesseltrack.geodesic import geodesic_distance

_AGE_BOUNDS = MinmaxBounds(2000.0, 2024.0)
_SOURCE_BOUNDS = MinmaxBounds(0.0, 7.0)
_DISTANCE_THRESHOLD = 1000.0
_TIME_THRESHOLD = 60.0


def ddm_reliability(
    sources: Iterable[int], years: Iterable[Optional[int]]
) -> list[float]:
    """Reliability score of each depth measurement from its source rank and survey year.

    A missing year counts as year 0.
    """
    source_weight, age_weight = judweight_depth()
    scores = []
    for source, year in zip(sources, years, strict=True):
        source_term = 1.0 - relative_to_bounds(_SOURCE_BOUNDS, float(source))
        age_term = relative_to_bounds(_AGE_BOUNDS, float(0 if year is None else year))
        scores.append(source_weight * source_term + min(max(age_weight * age_term, 0.0), 1.0))
    return scores


def _lon_lat_time(point: Any) -> tuple[float, float, float]:
    if hasattr(point, "x") and hasattr(point, "y") and hasattr(point, "m"):
        return float(point.x), float(point.y), float(point.m)
    lon, lat, time = point
    return float(lon), float(lat), float(time)


def within_distance(first: Any, second: Any, threshold: float) -> bool:
    """Whether two (lon, lat, time) points are closer than ``threshold`` metres."""
    lon1, lat1, _ = _lon_lat_time(first)
    lon2, lat2, _ = _lon_lat_time(second)
    return geodesic_distance((lon1, lat1), (lon2, lat2)) < threshold


def within_time(first: Any, second: Any, threshold: float) -> bool:
    """Whether ``second`` follows ``first`` by less than ``threshold`` seconds."""
    return _lon_lat_time(second)[2] - _lon_lat_time(first)[2] < threshold


def trajectory_split(from_points: Iterable[Any], to_points: Iterable[Any]) -> list[bool]:
    """For each pair of consecutive points, whether they belong to the same trajectory."""
    return [
        within_distance(first, second, _DISTANCE_THRESHOLD)
        and within_time(first, second, _TIME_THRESHOLD)
        for first, second in zip(from_points, to_points, strict=True)
    ]