"""Geodesic distances on the WGS84 ellipsoid."""

from __future__ import annotations

import math
from typing import Any

_A = 6378137.0
_F = 1.0 / 298.257223563
_B = (1.0 - _F) * _A
_MAX_ITERATIONS = 200
_CONVERGENCE = 1e-12


def _lon_lat(point: Any) -> tuple[float, float]:
    """Longitude and latitude of a point given as an object with ``x``/``y`` or as a pair."""
    if hasattr(point, "x") and hasattr(point, "y"):
        return float(point.x), float(point.y)
    lon, lat = point
    return float(lon), float(lat)


def geodesic_distance(first: Any, second: Any) -> float:
    """Shortest distance in metres over the WGS84 ellipsoid between two lon/lat points."""
    lon1, lat1 = _lon_lat(first)
    lon2, lat2 = _lon_lat(second)

    big_l = math.radians(lon2 - lon1)
    u1 = math.atan((1.0 - _F) * math.tan(math.radians(lat1)))
    u2 = math.atan((1.0 - _F) * math.tan(math.radians(lat2)))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lam = big_l
    sin_sigma = cos_sigma = sigma = cos2_alpha = cos_2sigma_m = 0.0
    for _ in range(_MAX_ITERATIONS):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.hypot(
            cos_u2 * sin_lam, cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam
        )
        if sin_sigma == 0.0:
            return 0.0
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos2_alpha = 1.0 - sin_alpha**2
        cos_2sigma_m = (
            cos_sigma - 2.0 * sin_u1 * sin_u2 / cos2_alpha if cos2_alpha != 0.0 else 0.0
        )
        c = _F / 16.0 * cos2_alpha * (4.0 + _F * (4.0 - 3.0 * cos2_alpha))
        previous = lam
        lam = big_l + (1.0 - c) * _F * sin_alpha * (
            sigma
            + c
            * sin_sigma
            * (cos_2sigma_m + c * cos_sigma * (-1.0 + 2.0 * cos_2sigma_m**2))
        )
        if abs(lam - previous) < _CONVERGENCE:
            break

    u_sq = cos2_alpha * (_A**2 - _B**2) / _B**2
    big_a = 1.0 + u_sq / 16384.0 * (4096.0 + u_sq * (-768.0 + u_sq * (320.0 - 175.0 * u_sq)))
    big_b = u_sq / 1024.0 * (256.0 + u_sq * (-128.0 + u_sq * (74.0 - 47.0 * u_sq)))
    delta_sigma = (
        big_b
        * sin_sigma
        * (
            cos_2sigma_m
            + big_b
            / 4.0
            * (
                cos_sigma * (-1.0 + 2.0 * cos_2sigma_m**2)
                - big_b
                / 6.0
                * cos_2sigma_m
                * (-3.0 + 4.0 * sin_sigma**2)
                * (-3.0 + 4.0 * cos_2sigma_m**2)
            )
        )
    )
    return _B * big_a * (sigma - delta_sigma)